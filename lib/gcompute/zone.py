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

"""A Compute Engine zone and the zonal resources it holds."""

import copy

from gcompute import autoscaler
from gcompute import disk
from gcompute import gce_exception as error
from gcompute import operation
from gcompute import service
from gcompute import vm

HTTP_SERVER_TAG = 'http-server'
HTTPS_SERVER_TAG = 'https-server'


class Zone(service.GetMetadataMixin, service.ExistsMixin, service.GetMixin,
           service.CollectionMixin, service.ServiceObject):
  """A class representing a GCE Zone resource.

  Attributes:
    compute: The Compute object of the project.
    name: The string name of the zone.
  """

  base_url = '/zones'

  def __init__(self, compute, name):
    """Initialize the Zone class.

    Args:
      compute: The Compute object of the project.
      name: The string name of the zone.
    """

    super(Zone, self).__init__(compute, name)
    self.compute = compute

  def autoscaler(self, name):
    """Return an Autoscaler object for an autoscaler in this zone."""
    return autoscaler.Autoscaler(self, name)

  def disk(self, name):
    """Return a Disk object for a disk in this zone."""
    return disk.Disk(self, name)

  def operation(self, name):
    """Return an Operation object for a zonal operation."""
    return operation.Operation(self, name)

  def vm(self, name):
    """Return a VM object for an instance in this zone."""
    return vm.VM(self, name)

  def create_autoscaler(self, name, config):
    """Create an autoscaler in this zone.

    The config accepts these shorthands for the autoscaling policy:
    coolDown (seconds), cpu (percent), loadBalance (percent), maxReplicas and
    minReplicas. A target that is not a URL is taken as the name of an
    instance group manager in this zone.

    Args:
      name: The string name of the autoscaler.
      config: A dictionary describing the autoscaler.

    Returns:
      A tuple of (autoscaler, operation, api_response).

    Raises:
      ConfigurationError: Raised when name, config or config['target'] is
          missing.
      ComputeError: Raised when API call fails.
    """

    if not name:
      raise error.ConfigurationError('An autoscaler name must be provided.')
    if config is None:
      raise error.ConfigurationError(
          'An autoscaler configuration object must be provided.')
    if not config.get('target'):
      raise error.ConfigurationError(
          'Cannot create an autoscaler without a target.')

    body = dict(config)
    body['name'] = name
    body['zone'] = self.name

    policy = dict(body.get('autoscalingPolicy', {}))
    if 'coolDown' in body:
      policy['coolDownPeriodSec'] = body.pop('coolDown')
    if 'cpu' in body:
      policy['cpuUtilization'] = {
          'utilizationTarget': body.pop('cpu') / 100.0}
    if 'loadBalance' in body:
      policy['loadBalancingUtilization'] = {
          'utilizationTarget': body.pop('loadBalance') / 100.0}
    if 'maxReplicas' in body:
      policy['maxNumReplicas'] = body.pop('maxReplicas')
    if 'minReplicas' in body:
      policy['minNumReplicas'] = body.pop('minReplicas')
    if policy:
      body['autoscalingPolicy'] = policy

    if not body['target'].startswith(('http://', 'https://')):
      body['target'] = '%s/projects/%s/zones/%s/instanceGroupManagers/%s' % (
          self.compute.gce_url, self.compute.project_id, self.name,
          body['target'])

    return self._insert('/autoscalers', body, self.autoscaler)

  def create_disk(self, name, config=None):
    """Create a persistent disk in this zone.

    See the API documentation:

    https://cloud.google.com/compute/docs/reference/v1/disks/insert

    Args:
      name: The string name of the disk.
      config: An optional dictionary describing the disk, ex:
          {'sizeGb': 10, 'sourceImage': ...}.

    Returns:
      A tuple of (disk, operation, api_response).

    Raises:
      ConfigurationError: No disk name was given.
      ComputeError: Raised when API call fails.
    """

    if not name:
      raise error.ConfigurationError('A disk name must be provided.')

    body = dict(config or {})
    body['name'] = name
    return self._insert('/disks', body, self.disk)

  def create_vm(self, name, config=None):
    """Create an instance in this zone.

    Defaults for the machine type and network come from the settings. A
    machine type given by name is expanded to its zonal partial URL, and the
    shorthands {'http': True} and {'https': True} add the matching server
    tags.

    Args:
      name: The string name of the instance.
      config: An optional dictionary describing the instance.

    Returns:
      A tuple of (vm, operation, api_response).

    Raises:
      ConfigurationError: No instance name was given.
      ComputeError: Raised when API call fails.
    """

    if not name:
      raise error.ConfigurationError('A VM name must be provided.')

    settings = self.compute.settings['compute']
    body = dict(config or {})
    body['name'] = name

    machine_type = body.get('machineType') or settings['machine_type']
    if '/' not in machine_type:
      machine_type = 'zones/%s/machineTypes/%s' % (self.name, machine_type)
    body['machineType'] = machine_type

    tags = []
    if body.pop('http', False):
      tags.append(HTTP_SERVER_TAG)
    if body.pop('https', False):
      tags.append(HTTPS_SERVER_TAG)
    if tags:
      existing = dict(body.get('tags', {}))
      existing['items'] = existing.get('items', []) + tags
      body['tags'] = existing

    if not body.get('networkInterfaces'):
      body['networkInterfaces'] = [{
          'network': 'global/networks/%s' % settings['network'],
          'accessConfigs': copy.deepcopy(settings['access_configs'])
      }]

    return self._insert('/instances', body, self.vm)

  def get_autoscalers(self, query=None):
    """Lists the autoscalers in this zone.

    Returns:
      A tuple of (autoscalers, next_query, api_response).
    """

    return self._list('/autoscalers', query, self.autoscaler)

  def get_disks(self, query=None):
    """Lists the disks in this zone.

    Returns:
      A tuple of (disks, next_query, api_response).
    """

    return self._list('/disks', query, self.disk)

  def get_operations(self, query=None):
    """Lists the operations in this zone.

    Returns:
      A tuple of (operations, next_query, api_response).
    """

    return self._list('/operations', query, self.operation)

  def get_vms(self, query=None):
    """Lists the instances in this zone.

    Returns:
      A tuple of (vms, next_query, api_response).
    """

    return self._list('/instances', query, self.vm)
