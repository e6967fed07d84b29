# Copyright The OpenTelemetry Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Resource detector for AWS EC2, backed by the instance metadata service.

Usage
-----

.. code:: python

    from opentelemetry.resource.detector.ec2 import AwsEc2ResourceDetector
    from opentelemetry.sdk.resources import get_aggregated_resources

    resource = get_aggregated_resources([AwsEc2ResourceDetector()])

The detector is also registered as the ``aws_ec2_imds`` entry point of the
``opentelemetry_resource_detector`` group, so it can be enabled with
``OTEL_EXPERIMENTAL_RESOURCE_DETECTORS=aws_ec2_imds``.

When the metadata service cannot be reached or answers with something that
is not an identity document, an empty resource is returned.
"""

from logging import getLogger
from typing import Optional

from opentelemetry.sdk.resources import Resource, ResourceDetector
from opentelemetry.semconv.resource import (
    CloudPlatformValues,
    CloudProviderValues,
    ResourceAttributes,
)

from ._client import InstanceMetadataClient, MetadataClient
from ._constants import DEFAULT_BASE_ADDRESS, DEFAULT_TIMEOUT
from ._document import (
    DecodeFailure,
    FetchError,
    IdentityDocument,
    TransportFailure,
)

logger = getLogger(__name__)

__all__ = [
    "AwsEc2ResourceDetector",
    "DEFAULT_BASE_ADDRESS",
    "DEFAULT_TIMEOUT",
    "DecodeFailure",
    "FetchError",
    "IdentityDocument",
    "InstanceMetadataClient",
    "MetadataClient",
    "TransportFailure",
]


class AwsEc2ResourceDetector(ResourceDetector):
    """Detects attribute values only available when the app is running on AWS
    Elastic Compute Cloud (EC2) and returns them in a Resource.

    Args:
        client: where the identity document comes from. Defaults to an
            ``InstanceMetadataClient`` for the standard metadata address.
        timeout: seconds used by ``detect`` when called without a timeout.
    """

    def __init__(
        self,
        client: Optional[MetadataClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        super().__init__()
        if client is None:
            client = InstanceMetadataClient()
        self._client = client
        self._timeout = timeout

    @property
    def client(self) -> MetadataClient:
        return self._client

    def detect(self, timeout: Optional[float] = None) -> "Resource":
        if timeout is None:
            timeout = self._timeout

        try:
            result = self._client.fetch(timeout)
        # pylint: disable=broad-except
        except Exception as exception:
            logger.warning(
                "%s failed: %s", self.__class__.__name__, exception
            )
            return Resource.get_empty()

        if isinstance(result, FetchError):
            if isinstance(result, DecodeFailure):
                logger.warning(
                    "%s failed: %s", self.__class__.__name__, result
                )
            else:
                # Usually means we are not on EC2
                logger.debug("%s failed: %s", self.__class__.__name__, result)
            return Resource.get_empty()

        return Resource(_to_attributes(result))


def _to_attributes(document: IdentityDocument):
    return {
        ResourceAttributes.CLOUD_PROVIDER: CloudProviderValues.AWS.value,
        ResourceAttributes.CLOUD_PLATFORM: CloudPlatformValues.AWS_EC2.value,
        ResourceAttributes.CLOUD_ACCOUNT_ID: document.account_id,
        ResourceAttributes.CLOUD_REGION: document.region,
        ResourceAttributes.CLOUD_AVAILABILITY_ZONE: document.availability_zone,
        ResourceAttributes.HOST_ID: document.instance_id,
        ResourceAttributes.HOST_TYPE: document.instance_type,
        ResourceAttributes.HOST_IMAGE_ID: document.image_id,
    }
