#!/usr/bin/env python3
"""Configuration for the event gateway

Configuration hierarchy:
- gateway_config: HTTP/gRPC listen addresses and streaming settings
- logging_config: Logging configuration
"""
import os
from dotenv import load_dotenv
from .logging_config import LoggingConfig
from .gateway_config import GatewayConfig

# Load environment file based on ENV
env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
env_files = {
    "development": "deployment/environments/dev.env",
    "dev": "deployment/environments/dev.env",
    "testing": "deployment/environments/test.env",
    "test": "deployment/environments/test.env",
    "staging": "deployment/environments/staging.env",
    "production": "deployment/environments/production.env",
}
env_file = env_files.get(env, "deployment/environments/dev.env")
load_dotenv(env_file, override=False)

# Create global settings instance
settings = GatewayConfig.from_env()

def get_settings() -> GatewayConfig:
    """Get global settings instance"""
    return settings

def reload_settings() -> GatewayConfig:
    """Reload settings from environment"""
    global settings
    settings = GatewayConfig.from_env()
    return settings

__all__ = [
    'GatewayConfig',
    'LoggingConfig',
    'get_settings',
    'reload_settings',
    'settings',
]
