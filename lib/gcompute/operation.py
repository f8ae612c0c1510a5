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

"""A Compute Engine operation, used to follow a create or delete request."""

import logging
import time

from gcompute import gce_exception as error
from gcompute import service

DONE = 'DONE'


class Operation(service.GetMetadataMixin, service.ExistsMixin,
                service.GetMixin, service.ServiceObject):
  """A class representing a GCE Operation resource.

  Operations owned by the project are global. Operations owned by a Zone or a
  Region live under that location.

  Attributes:
    compute: The Compute object of the project.
    name: The string name of the operation.
    metadata: The dictionary last returned by the API for the operation.
  """

  def __init__(self, scope, name):
    """Initialize the Operation class.

    Args:
      scope: The Compute, Zone or Region object owning the operation.
      name: The string name of the operation.
    """

    super(Operation, self).__init__(scope, name)
    if isinstance(scope, service.ServiceObject):
      self.base_url = '/operations'
      self.compute = scope.compute
    else:
      self.base_url = '/global/operations'
      self.compute = scope

  def delete(self):
    """Delete the operation.

    Returns:
      The dictionary API response.
    """

    return self._delete()

  def wait(self, timeout=None):
    """Poll the operation until its status is DONE.

    Args:
      timeout: Optional number of seconds to wait before giving up.

    Returns:
      The dictionary metadata of the finished operation.

    Raises:
      OperationError: The operation finished with an error, or the timeout
          expired first.
      ComputeError: Raised when API call fails.
    """

    interval = self.compute.settings['compute']['operation_poll_interval']
    deadline = None
    if timeout is not None:
      deadline = time.monotonic() + timeout

    while True:
      metadata, _ = self.get_metadata()
      if metadata.get('status') == DONE:
        if metadata.get('error'):
          raise error.OperationError(
              _error_message(metadata['error']), response=metadata)
        return metadata
      if deadline is not None and time.monotonic() >= deadline:
        raise error.OperationError(
            'Timed out waiting for operation %s' % self.name,
            response=metadata)
      logging.debug('Operation %s is %s', self.name, metadata.get('status'))
      time.sleep(interval)


def _error_message(operation_error):
  messages = [e.get('message', e.get('code', ''))
              for e in operation_error.get('errors', [])]
  return '; '.join(messages) or 'Operation failed'
