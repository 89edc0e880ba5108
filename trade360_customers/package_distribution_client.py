"""
Customers API client for package distribution control.
"""

from typing import Optional

from trade360_common.cancellation import CancellationToken
from trade360_common.http_client import BaseHttpClient

from .models import GetDistributionStatusResponse, StartDistributionResponse, StopDistributionResponse


class PackageDistributionApiClient(BaseHttpClient):
    """Starts, stops and reports on message distribution for a package."""

    default_name = "customers-package-distribution"

    async def get_distribution_status(self, cancellation: Optional[CancellationToken] = None
                                      ) -> GetDistributionStatusResponse:
        return await self.send("package/GetDistributionStatus", None, GetDistributionStatusResponse,
                               cancellation=cancellation)

    async def start_distribution(self, cancellation: Optional[CancellationToken] = None
                                 ) -> StartDistributionResponse:
        return await self.send("distribution/start", None, StartDistributionResponse, cancellation=cancellation)

    async def stop_distribution(self, cancellation: Optional[CancellationToken] = None
                                ) -> StopDistributionResponse:
        return await self.send("distribution/stop", None, StopDistributionResponse, cancellation=cancellation)
