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

import abc
from logging import getLogger
from typing import Union

import requests

# pylint: disable=no-name-in-module
from opentelemetry.instrumentation.utils import suppress_instrumentation

from ._constants import DEFAULT_BASE_ADDRESS, IDENTITY_DOCUMENT_PATH
from ._document import (
    DecodeFailure,
    FetchError,
    IdentityDocument,
    TransportFailure,
)

_logger = getLogger(__name__)


class MetadataClient(abc.ABC):
    """Fetches the identity document of the instance the process runs on."""

    @abc.abstractmethod
    def fetch(self, timeout: float) -> Union[IdentityDocument, FetchError]:
        """Performs a single attempt at fetching the identity document.

        Args:
            timeout: seconds allowed for connecting and reading.

        Returns:
            The document, or a ``FetchError`` describing what went wrong.
            Implementations must not raise.
        """


class InstanceMetadataClient(MetadataClient):
    """Talks to the EC2 instance metadata service over HTTP.

    Uses a special URI to get the instance identity document. See more:
    https://docs.aws.amazon.com/AWSEC2/latest/UserGuide/instancedata-data-retrieval.html
    """

    def __init__(self, base_address: str = DEFAULT_BASE_ADDRESS):
        self._base_address = base_address.rstrip("/")
        self._document_url = self._base_address + IDENTITY_DOCUMENT_PATH
        self._session = requests.Session()

    @property
    def base_address(self) -> str:
        return self._base_address

    @property
    def document_url(self) -> str:
        return self._document_url

    def fetch(self, timeout: float) -> Union[IdentityDocument, FetchError]:
        if timeout <= 0:
            return TransportFailure(
                f"GET {self._document_url} not attempted: "
                f"timeout of {timeout}s already elapsed"
            )

        _logger.debug("Fetching identity document from %s", self._document_url)
        with suppress_instrumentation():
            try:
                response = self._session.get(
                    self._document_url, timeout=timeout
                )
            except requests.exceptions.RequestException as req_err:
                return TransportFailure(
                    f"GET {self._document_url} failed: {req_err!r}"
                )

        # Deeply nested bodies exhaust the decoder's recursion limit
        try:
            document = IdentityDocument.from_json(response.json())
        except (ValueError, RecursionError) as decode_err:
            return DecodeFailure(
                f"failed to decode identity document "
                f"(HTTP {response.status_code}): {decode_err}"
            )

        if not response.ok:
            return TransportFailure(
                f"GET {self._document_url} returned HTTP "
                f"{response.status_code} {response.reason}"
            )
        return document

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "InstanceMetadataClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()
