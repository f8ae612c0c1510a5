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

"""A Compute Engine virtual machine instance."""

from gcompute import gce_exception as error
from gcompute import service


class VM(service.GetMetadataMixin, service.ExistsMixin, service.CreateMixin,
         service.GetMixin, service.DeleteMixin, service.ServiceObject):
  """A class representing a GCE Instance resource.

  Attributes:
    zone: The Zone object the instance runs in.
    compute: The Compute object of the project.
    name: The string name of the instance.
    metadata: The dictionary last returned by the API for the instance.
  """

  base_url = '/instances'

  def __init__(self, zone, name):
    """Initialize the VM class.

    Args:
      zone: The Zone object the instance runs in.
      name: The string name of the instance.
    """

    super(VM, self).__init__(zone, name)
    self.zone = zone
    self.compute = zone.compute
    self.operation_owner = zone
    self.create_method = zone.create_vm

  def start(self):
    """Start a stopped instance.

    Returns:
      A tuple of (operation, api_response).
    """

    return self._action('/start')

  def stop(self):
    """Stop a running instance.

    Returns:
      A tuple of (operation, api_response).
    """

    return self._action('/stop')

  def reset(self):
    """Hard reset the instance.

    Returns:
      A tuple of (operation, api_response).
    """

    return self._action('/reset')

  def attach_disk(self, disk, options=None):
    """Attach a persistent disk to the instance.

    See the API documentation:

    https://cloud.google.com/compute/docs/reference/v1/instances/attachDisk

    Args:
      disk: The Disk object to attach.
      options: An optional dictionary of attached disk fields. The shorthand
          {'readOnly': True} sets the mode to READ_ONLY.

    Returns:
      A tuple of (operation, api_response).

    Raises:
      ComputeError: Raised when API call fails.
    """

    body = {
        'mode': 'READ_WRITE',
        'source': disk.formatted_name,
        'type': 'PERSISTENT'
    }
    body.update(options or {})
    if body.pop('readOnly', False):
      body['mode'] = 'READ_ONLY'
    return self._action('/attachDisk', body=body)

  def detach_disk(self, disk):
    """Detach a disk from the instance.

    Args:
      disk: The string device name of the attached disk, or a Disk object. For
          a Disk the device name is looked up in the instance's metadata.

    Returns:
      A tuple of (operation, api_response).

    Raises:
      ConfigurationError: The Disk is not attached to this instance.
      ComputeError: Raised when API call fails.
    """

    device_name = disk
    if isinstance(disk, service.ServiceObject):
      device_name = self._device_name(disk)
    return self._action('/detachDisk', qs={'deviceName': device_name})

  def get_serial_port_output(self, port=1):
    """Get the output of one of the instance's serial ports.

    Args:
      port: The integer serial port number, 1 to 4.

    Returns:
      A tuple of (contents, api_response).

    Raises:
      ComputeError: Raised when API call fails.
    """

    response = self.request('GET', '/serialPort', qs={'port': port})
    return response.get('contents', ''), response

  def get_tags(self):
    """Get the instance's network tags.

    Returns:
      A tuple of (tags, fingerprint, api_response). The fingerprint must be
      passed back to set_tags.

    Raises:
      ComputeError: Raised when API call fails.
    """

    metadata, response = self.get_metadata()
    tags = metadata.get('tags', {})
    return tags.get('items', []), tags.get('fingerprint'), response

  def set_tags(self, tags, fingerprint):
    """Replace the instance's network tags.

    Args:
      tags: A list of string tags.
      fingerprint: The string fingerprint returned by get_tags.

    Returns:
      A tuple of (operation, api_response).
    """

    return self._action(
        '/setTags', body={'items': list(tags), 'fingerprint': fingerprint})

  def _action(self, uri, body=None, qs=None):
    response = self.request('POST', uri, body=body, qs=qs)
    return self._wrap_operation(self.zone, response), response

  def _device_name(self, disk):
    metadata, _ = self.get_metadata()
    for attached in metadata.get('disks', []):
      if attached.get('source', '').endswith(disk.formatted_name):
        return attached['deviceName']
    raise error.ConfigurationError(
        'Disk %s is not attached to %s.' % (disk.name, self.name))
