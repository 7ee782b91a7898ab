"""Adapter configuration: declarative options resolved into adapter instances."""

from config.adapter import AdapterConfig
from config.settings import AdapterOptions, load_adapter_options

__all__ = ["AdapterConfig", "AdapterOptions", "load_adapter_options"]
