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

"""A Compute Engine region and the regional resources it holds."""

from gcompute import address
from gcompute import gce_exception as error
from gcompute import operation
from gcompute import service


class Region(service.GetMetadataMixin, service.ExistsMixin, service.GetMixin,
             service.CollectionMixin, service.ServiceObject):
  """A class representing a GCE Region resource.

  Attributes:
    compute: The Compute object of the project.
    name: The string name of the region.
  """

  base_url = '/regions'

  def __init__(self, compute, name):
    super(Region, self).__init__(compute, name)
    self.compute = compute

  def address(self, name):
    """Return an Address object for an address in this region."""
    return address.Address(self, name)

  def operation(self, name):
    """Return an Operation object for a regional operation."""
    return operation.Operation(self, name)

  def create_address(self, name, config=None):
    """Reserve a static IP address in this region.

    Args:
      name: The string name of the address.
      config: An optional dictionary describing the address, ex:
          {'address': '130.211.0.10'} to promote an ephemeral address.

    Returns:
      A tuple of (address, operation, api_response).

    Raises:
      ConfigurationError: No address name was given.
      ComputeError: Raised when API call fails.
    """

    if not name:
      raise error.ConfigurationError('An address name must be provided.')

    body = dict(config or {})
    body['name'] = name
    return self._insert('/addresses', body, self.address)

  def get_addresses(self, query=None):
    """Lists the addresses reserved in this region.

    Returns:
      A tuple of (addresses, next_query, api_response).
    """

    return self._list('/addresses', query, self.address)

  def get_operations(self, query=None):
    """Lists the operations in this region.

    Returns:
      A tuple of (operations, next_query, api_response).
    """

    return self._list('/operations', query, self.operation)
