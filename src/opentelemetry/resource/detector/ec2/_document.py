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

from dataclasses import dataclass
from typing import Any, NamedTuple

from ._constants import (
    _ACCOUNT_ID_KEY,
    _ARCHITECTURE_KEY,
    _AVAILABILITY_ZONE_KEY,
    _IMAGE_ID_KEY,
    _INSTANCE_ID_KEY,
    _INSTANCE_TYPE_KEY,
    _PRIVATE_IP_KEY,
    _REGION_KEY,
)

_FIELDS_BY_KEY = (
    (_PRIVATE_IP_KEY, "private_ip"),
    (_INSTANCE_ID_KEY, "instance_id"),
    (_INSTANCE_TYPE_KEY, "instance_type"),
    (_ACCOUNT_ID_KEY, "account_id"),
    (_IMAGE_ID_KEY, "image_id"),
    (_ARCHITECTURE_KEY, "architecture"),
    (_REGION_KEY, "region"),
    (_AVAILABILITY_ZONE_KEY, "availability_zone"),
)


class IdentityDocument(NamedTuple):
    """The EC2 instance identity document.

    See: https://docs.aws.amazon.com/AWSEC2/latest/UserGuide/instance-identity-documents.html
    """

    private_ip: str = ""
    instance_id: str = ""
    instance_type: str = ""
    account_id: str = ""
    image_id: str = ""
    architecture: str = ""
    region: str = ""
    availability_zone: str = ""

    @classmethod
    def from_json(cls, payload: Any) -> "IdentityDocument":
        """Builds a document from a decoded JSON response body.

        Keys the document does not know about are ignored and missing keys
        keep their empty default.

        Raises:
            ValueError: if ``payload`` is not a JSON object or a known key
                does not hold a string.
        """
        if not isinstance(payload, dict):
            raise ValueError(
                f"expected a JSON object, got {type(payload).__name__}"
            )
        fields = {}
        for key, field in _FIELDS_BY_KEY:
            if key not in payload:
                continue
            value = payload[key]
            if not isinstance(value, str):
                raise ValueError(
                    f"expected a string for {key!r}, "
                    f"got {type(value).__name__}"
                )
            fields[field] = value
        return cls(**fields)


@dataclass(frozen=True)
class FetchError:
    """Why the identity document could not be fetched.

    Returned by ``MetadataClient.fetch`` instead of being raised.
    """

    message: str

    def __str__(self) -> str:
        return self.message


class TransportFailure(FetchError):
    """The request was not sent, timed out or got an error status."""


class DecodeFailure(FetchError):
    """The response body is not a valid identity document."""
