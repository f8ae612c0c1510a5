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

"""A Compute Engine backend service."""

from gcompute import service


class BackendService(service.GetMetadataMixin, service.ExistsMixin,
                     service.CreateMixin, service.GetMixin,
                     service.DeleteMixin, service.ServiceObject):
  """A class representing a GCE BackendService resource.

  Attributes:
    compute: The Compute object of the project.
    name: The string name of the backend service.
  """

  base_url = '/global/backendServices'

  def __init__(self, compute, name):
    super(BackendService, self).__init__(compute, name)
    self.compute = compute
    self.operation_owner = compute
    self.create_method = compute.create_service

  def get_health(self, group):
    """Get the health of the instances in one backend group.

    Args:
      group: The string URL of an instance group used by this service.

    Returns:
      A tuple of (health_status, api_response) where health_status is the
      list of per-instance health records.

    Raises:
      ComputeError: Raised when API call fails.
    """

    response = self.request('POST', '/getHealth', body={'group': group})
    return response.get('healthStatus', []), response

  def set_metadata(self, metadata):
    """Patch the backend service's metadata.

    Args:
      metadata: A dictionary of backend service fields to change.

    Returns:
      A tuple of (operation, api_response).
    """

    body = dict(metadata)
    body['name'] = self.name
    response = self.request('PATCH', body=body)
    return self._wrap_operation(self.compute, response), response
