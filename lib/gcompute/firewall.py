# Copyright 2012 Google Inc. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""A Compute Engine firewall rule."""

from gcompute import service


class Firewall(service.GetMetadataMixin, service.ExistsMixin,
               service.CreateMixin, service.GetMixin, service.DeleteMixin,
               service.ServiceObject):
  """A class representing a GCE Firewall resource.

  Attributes:
    compute: The Compute object of the project.
    name: The string name of the firewall.
    metadata: The dictionary last returned by the API for the firewall.
  """

  base_url = '/global/firewalls'

  def __init__(self, compute, name):
    """Initialize the Firewall class.

    Args:
      compute: The Compute object of the project.
      name: The string name of the firewall.
    """

    super(Firewall, self).__init__(compute, name)
    self.compute = compute
    self.operation_owner = compute
    self.create_method = compute.create_firewall

  def set_metadata(self, metadata):
    """Patch the firewall's metadata.

    See the API documentation:

    https://cloud.google.com/compute/docs/reference/v1/firewalls/patch

    Args:
      metadata: A dictionary of firewall fields to change.

    Returns:
      A tuple of (operation, api_response).

    Raises:
      ComputeError: Raised when API call fails.
    """

    body = dict(metadata)
    body['name'] = self.name
    response = self.request('PATCH', body=body)
    return self._wrap_operation(self.compute, response), response
