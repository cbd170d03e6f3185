"""Aura backend infrastructure package."""

from .request_executor import RequestExecutor, build_multipart_body
from .aura_api_client import AuraApiClient

__all__ = ["RequestExecutor", "build_multipart_body", "AuraApiClient"]
