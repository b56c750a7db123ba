"""
Eventmaster gateway test suite
"""
