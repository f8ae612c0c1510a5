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

"""Gce classes and methods to manage Compute Engine resources."""

from gcompute import backend_service
from gcompute import firewall
from gcompute import gce_exception as error
from gcompute import network
from gcompute import operation
from gcompute import region
from gcompute import service
from gcompute import snapshot
from gcompute import util
from gcompute import zone


class Compute(service.CollectionMixin, service.Service):
  """Gce classes and methods to work with Compute Engine.

  Every get_* method lists one page of resources and returns a tuple of
  (resources, next_query, api_response). next_query is None on the last page;
  otherwise pass it back to the same method to fetch the next page, or use
  gcompute.paginate to iterate over every page.

  Attributes:
    settings: Dictionary of settings as set in the settings.json file.
    gce_url: The string URL of the Compute Engine API endpoint.
    project_id: A string name for the Compute Engine project.
  """

  def create_firewall(self, name, config):
    """Create a firewall rule.

    On top of the API's own fields, config accepts these shorthands:

      protocols: A dictionary mapping a protocol name to a port, a list of
          ports, or an empty list for every port. Appended to 'allowed'.
      ranges: A string or list of string source IP ranges ('sourceRanges').
      tags: A string or list of string source tags ('sourceTags').

    See the API documentation:

    https://cloud.google.com/compute/docs/reference/v1/firewalls/insert

    Args:
      name: The string name of the firewall.
      config: A dictionary describing the firewall. Not modified.

    Returns:
      A tuple of (firewall, operation, api_response).

    Raises:
      ConfigurationError: Raised before any request when name or config is
          missing.
      ComputeError: Raised when API call fails.
    """

    if not name:
      raise error.ConfigurationError('A firewall name must be provided.')
    if config is None:
      raise error.ConfigurationError(
          'A firewall configuration object must be provided.')

    body = dict(config)
    body['name'] = name

    if 'allowed' in body:
      body['allowed'] = util.to_list(body['allowed'])

    if 'protocols' in body:
      allowed = body.setdefault('allowed', [])
      for protocol, ports in body.pop('protocols').items():
        rule = {'IPProtocol': protocol}
        if ports:
          rule['ports'] = util.to_list(ports)
        allowed.append(rule)

    if 'ranges' in body:
      body['sourceRanges'] = util.to_list(body.pop('ranges'))

    if 'tags' in body:
      body['sourceTags'] = util.to_list(body.pop('tags'))

    return self._insert('/global/firewalls', body, self.firewall)

  def create_network(self, name, config):
    """Create a network.

    config accepts 'range' for 'IPv4Range' and 'gateway' for 'gatewayIPv4'.

    Args:
      name: The string name of the network.
      config: A dictionary describing the network. Not modified.

    Returns:
      A tuple of (network, operation, api_response).

    Raises:
      ConfigurationError: Raised before any request when name or config is
          missing.
      ComputeError: Raised when API call fails.
    """

    if not name:
      raise error.ConfigurationError('A network name must be provided.')
    if config is None:
      raise error.ConfigurationError(
          'A network configuration object must be provided.')

    body = dict(config)
    body['name'] = name

    if 'range' in body:
      body['IPv4Range'] = body.pop('range')

    if 'gateway' in body:
      body['gatewayIPv4'] = body.pop('gateway')

    return self._insert('/global/networks', body, self.network)

  def create_service(self, name, config):
    """Create a backend service.

    See the API documentation:

    https://cloud.google.com/compute/docs/reference/v1/backendServices/insert

    Args:
      name: The string name of the backend service.
      config: A dictionary describing the backend service. Not modified.

    Returns:
      A tuple of (backend_service, operation, api_response).

    Raises:
      ConfigurationError: Raised before any request when name or config is
          missing.
      ComputeError: Raised when API call fails.
    """

    if not name:
      raise error.ConfigurationError('A service name must be provided.')
    if config is None:
      raise error.ConfigurationError(
          'A service configuration object must be provided.')

    body = dict(config)
    body['name'] = name
    return self._insert('/global/backendServices', body, self.service)

  def firewall(self, name):
    """Return a Firewall object."""
    return firewall.Firewall(self, name)

  def network(self, name):
    """Return a Network object."""
    return network.Network(self, name)

  def operation(self, name):
    """Return an Operation object for a global operation."""
    return operation.Operation(self, name)

  def region(self, name):
    """Return a Region object."""
    return region.Region(self, name)

  def service(self, name):
    """Return a BackendService object."""
    return backend_service.BackendService(self, name)

  def snapshot(self, name):
    """Return a Snapshot object."""
    return snapshot.Snapshot(self, name)

  def zone(self, name):
    """Return a Zone object."""
    return zone.Zone(self, name)

  def get_addresses(self, query=None):
    """Lists the addresses of every region.

    query holds any optional parameters for the aggregated list request.
    See the API documentation:

    https://cloud.google.com/compute/docs/reference/v1/addresses/aggregatedList

    Args:
      query: An optional dictionary of list parameters. Not modified.

    Returns:
      A tuple of (addresses, next_query, api_response).

    Raises:
      ComputeError: Raised when API call fails.
    """

    return self._list_aggregated(
        '/aggregated/addresses', query, 'regions', 'addresses',
        lambda location, name: location.address(name))

  def get_autoscalers(self, query=None):
    """Lists the autoscalers of every zone.

    Groups that are not keyed by a zone are skipped.

    Returns:
      A tuple of (autoscalers, next_query, api_response).
    """

    return self._list_aggregated(
        '/aggregated/autoscalers', query, 'zones', 'autoscalers',
        lambda location, name: location.autoscaler(name))

  def get_disks(self, query=None):
    """Lists the disks of every zone.

    Returns:
      A tuple of (disks, next_query, api_response).
    """

    return self._list_aggregated(
        '/aggregated/disks', query, 'zones', 'disks',
        lambda location, name: location.disk(name))

  def get_firewalls(self, query=None):
    """Lists all firewalls for a project.

    Args:
      query: An optional dictionary of list parameters, ex:
          {'filter': 'name eq ^web-.*', 'maxResults': 10}.

    Returns:
      A tuple of (firewalls, next_query, api_response).

    Raises:
      ComputeError: Raised when API call fails.
    """

    return self._list('/global/firewalls', query, self.firewall)

  def get_networks(self, query=None):
    """Lists all networks for a project.

    Returns:
      A tuple of (networks, next_query, api_response).
    """

    return self._list('/global/networks', query, self.network)

  def get_operations(self, query=None):
    """Lists the global operations of a project.

    Returns:
      A tuple of (operations, next_query, api_response).
    """

    return self._list('/global/operations', query, self.operation)

  def get_regions(self, query=None):
    return self._list('/regions', query, self.region)

  def get_services(self, query=None):
    """Lists all backend services for a project.

    Returns:
      A tuple of (backend_services, next_query, api_response).
    """

    return self._list('/global/backendServices', query, self.service)

  def get_snapshots(self, query=None):
    """Lists all snapshots for a project.

    Returns:
      A tuple of (snapshots, next_query, api_response).
    """

    return self._list('/global/snapshots', query, self.snapshot)

  def get_vms(self, query=None):
    """Lists the instances of every zone.

    Args:
      query: An optional dictionary of list parameters. Not modified.

    Returns:
      A tuple of (vms, next_query, api_response).

    Raises:
      ComputeError: Raised when API call fails.
    """

    return self._list_aggregated(
        '/aggregated/instances', query, 'zones', 'instances',
        lambda location, name: location.vm(name))

  def get_zones(self, query=None):
    return self._list('/zones', query, self.zone)
