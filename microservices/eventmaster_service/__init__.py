"""
Eventmaster Service - Event Gateway

Records and queries timestamped events tagged by datacenter, topic, host
and free-form tags:
- gRPC front end (typed messages, server-streaming queries)
- HTML form front end (listing, query and create pages)
- Per-operation latency and outcome metrics
"""

__version__ = "1.0.0"
