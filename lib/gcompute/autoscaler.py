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

"""A Compute Engine autoscaler."""

from gcompute import service


class Autoscaler(service.GetMetadataMixin, service.ExistsMixin,
                 service.CreateMixin, service.GetMixin, service.DeleteMixin,
                 service.ServiceObject):
  """A class representing a GCE Autoscaler resource.

  Attributes:
    zone: The Zone object the autoscaler lives in.
    compute: The Compute object of the project.
    name: The string name of the autoscaler.
  """

  base_url = '/autoscalers'

  def __init__(self, zone, name):
    """Initialize the Autoscaler class.

    Args:
      zone: The Zone object the autoscaler lives in.
      name: The string name of the autoscaler.
    """

    super(Autoscaler, self).__init__(zone, name)
    self.zone = zone
    self.compute = zone.compute
    self.operation_owner = zone
    self.create_method = zone.create_autoscaler

  def set_metadata(self, metadata):
    """Patch the autoscaler's metadata.

    The autoscalers patch method addresses the resource through the
    'autoscaler' query parameter rather than the path.

    Args:
      metadata: A dictionary of autoscaler fields to change.

    Returns:
      A tuple of (operation, api_response).

    Raises:
      ComputeError: Raised when API call fails.
    """

    body = dict(metadata)
    body['name'] = self.name
    response = self.zone.request(
        'PATCH', self.base_url, body=body, qs={'autoscaler': self.name})
    return self._wrap_operation(self.zone, response), response
