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

# Link-local address of the EC2 instance metadata service
DEFAULT_BASE_ADDRESS = "http://169.254.169.254"
IDENTITY_DOCUMENT_PATH = "/latest/dynamic/instance-identity/document"

# Seconds, connect and read
DEFAULT_TIMEOUT = 5

# Identity document keys as sent by the metadata service
_PRIVATE_IP_KEY = "privateIp"
_INSTANCE_ID_KEY = "instanceId"
_INSTANCE_TYPE_KEY = "instanceType"
_ACCOUNT_ID_KEY = "accountId"
_IMAGE_ID_KEY = "imageId"
_ARCHITECTURE_KEY = "architecture"
_REGION_KEY = "region"
_AVAILABILITY_ZONE_KEY = "availabilityZone"
