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

"""A Compute Engine network."""

from gcompute import service


class Network(service.GetMetadataMixin, service.ExistsMixin,
              service.CreateMixin, service.GetMixin, service.DeleteMixin,
              service.ServiceObject):
  """A class representing a GCE Network resource.

  Attributes:
    compute: The Compute object of the project.
    name: The string name of the network.
    formatted_name: The string partial URL of the network, as used in the
        network field of other resources.
  """

  base_url = '/global/networks'

  def __init__(self, compute, name):
    """Initialize the Network class.

    Args:
      compute: The Compute object of the project.
      name: The string name of the network.
    """

    super(Network, self).__init__(compute, name)
    self.compute = compute
    self.operation_owner = compute
    self.create_method = compute.create_network
    self.formatted_name = 'global/networks/%s' % name

  def create_firewall(self, name, config):
    """Create a firewall bound to this network.

    Args:
      name: The string name of the firewall.
      config: A dictionary describing the firewall. See
          Compute.create_firewall.

    Returns:
      A tuple of (firewall, operation, api_response).
    """

    config = dict(config or {})
    config['network'] = self.formatted_name
    return self.compute.create_firewall(name, config)

  def get_firewalls(self, query=None):
    """List the firewalls bound to this network.

    Args:
      query: An optional dictionary of list parameters. A filter matching
          this network replaces any filter it holds.

    Returns:
      A tuple of (firewalls, next_query, api_response).
    """

    query = dict(query or {})
    query['filter'] = 'network eq .*/%s$' % self.formatted_name
    return self.compute.get_firewalls(query)
