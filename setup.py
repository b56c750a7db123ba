#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Setup configuration for the eventmaster gateway.
"""

from setuptools import setup, find_namespace_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="eventmaster-gateway",
    version="1.0.0",
    description="gRPC and HTML front ends over an event store, with Prometheus instrumentation",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_namespace_packages(include=["core", "core.*", "microservices", "microservices.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=[
        "grpcio>=1.50.0",
        "grpcio-tools>=1.50.0",
        "protobuf>=4.21.0,<6",
        "pydantic>=2.0.0",
        "fastapi>=0.108.0",
        "uvicorn>=0.23.0",
        "jinja2>=3.1.0",
        "python-multipart>=0.0.6",
        "python-dotenv>=1.0.0",
        "tenacity>=8.0.0",
        "prometheus-client>=0.17.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "httpx>=0.24.0",
        ],
    },
    include_package_data=True,
    package_data={
        "microservices.eventmaster_service": ["templates/*.html"],
        "microservices.eventmaster_service.proto": ["*.proto"],
    },
)
