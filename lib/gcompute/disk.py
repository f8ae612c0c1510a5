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

"""A Compute Engine persistent disk."""

from gcompute import gce_exception as error
from gcompute import service
from gcompute import snapshot


class Disk(service.GetMetadataMixin, service.ExistsMixin,
           service.CreateMixin, service.GetMixin, service.DeleteMixin,
           service.ServiceObject):
  """A class representing a GCE Disk resource.

  Attributes:
    zone: The Zone object the disk lives in.
    compute: The Compute object of the project.
    name: The string name of the disk.
    formatted_name: The string partial URL of the disk, as used when
        attaching it to a VM.
  """

  base_url = '/disks'

  def __init__(self, zone, name):
    """Initialize the Disk class.

    Args:
      zone: The Zone object the disk lives in.
      name: The string name of the disk.
    """

    super(Disk, self).__init__(zone, name)
    self.zone = zone
    self.compute = zone.compute
    self.operation_owner = zone
    self.create_method = zone.create_disk
    self.formatted_name = 'projects/%s/zones/%s/disks/%s' % (
        self.compute.project_id, zone.name, name)

  def snapshot(self, name):
    """Return a DiskSnapshot object for a snapshot of this disk.

    Args:
      name: The string name of the snapshot.
    """

    return snapshot.DiskSnapshot(self, name)

  def create_snapshot(self, name, config=None):
    """Take a snapshot of the disk.

    See the API documentation:

    https://cloud.google.com/compute/docs/reference/v1/disks/createSnapshot

    Args:
      name: The string name of the snapshot.
      config: An optional dictionary of additional snapshot fields, ex:
          {'description': 'nightly'}.

    Returns:
      A tuple of (snapshot, operation, api_response).

    Raises:
      ConfigurationError: No snapshot name was given.
      ComputeError: Raised when API call fails.
    """

    if not name:
      raise error.ConfigurationError('A snapshot name must be provided.')

    body = dict(config or {})
    body['name'] = name
    response = self.request('POST', '/createSnapshot', body=body)
    operation = self._wrap_operation(self.zone, response)
    return self.snapshot(name), operation, response
