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

"""Tests for the Compute facade."""

import unittest
from unittest import mock

from gcompute import backend_service
from gcompute import firewall
from gcompute import gce
from gcompute import gce_exception as error
from gcompute import network
from gcompute import operation
from gcompute import region
from gcompute import snapshot
from gcompute import zone

PROJECT_ID = 'project-id'


class ComputeTestCase(unittest.TestCase):

  def setUp(self):
    self.compute = gce.Compute(PROJECT_ID)
    self.compute.request = mock.Mock(return_value={'name': 'op-name'})

  def request_body(self):
    return self.compute.request.call_args[1]['body']


class InstantiationTest(ComputeTestCase):

  def test_uses_compute_v1_endpoint_and_scope(self):
    self.assertEqual(
        self.compute.gce_url, 'https://www.googleapis.com/compute/v1')
    self.assertEqual(
        self.compute.scopes, ['https://www.googleapis.com/auth/compute'])
    self.assertEqual(self.compute.project_id, PROJECT_ID)


class CreateFirewallTest(ComputeTestCase):

  def test_requires_name(self):
    self.assertRaisesRegex(
        error.ConfigurationError, 'A firewall name must be provided.',
        self.compute.create_firewall, None, {})
    self.compute.request.assert_not_called()

  def test_requires_config(self):
    self.assertRaisesRegex(
        error.ConfigurationError,
        'A firewall configuration object must be provided.',
        self.compute.create_firewall, 'name', None)
    self.compute.request.assert_not_called()

  def test_formats_protocols(self):
    config = {
        'allowed': {'IPProtocol': 'http', 'ports': [8000]},
        'protocols': {'https': [8080, 9000], 'ssh': 22, 'ftp': []}
    }

    self.compute.create_firewall('name', config)

    body = self.request_body()
    self.assertEqual(body['allowed'], [
        {'IPProtocol': 'http', 'ports': [8000]},
        {'IPProtocol': 'https', 'ports': [8080, 9000]},
        {'IPProtocol': 'ssh', 'ports': [22]},
        {'IPProtocol': 'ftp'}
    ])
    self.assertNotIn('protocols', body)

  def test_formats_protocols_without_allowed(self):
    self.compute.create_firewall(
        'name', {'protocols': {'https': [8080, 9000], 'ssh': 22, 'ftp': []}})

    self.assertEqual(self.request_body()['allowed'], [
        {'IPProtocol': 'https', 'ports': [8080, 9000]},
        {'IPProtocol': 'ssh', 'ports': [22]},
        {'IPProtocol': 'ftp'}
    ])

  def test_formats_ranges_to_source_ranges(self):
    self.compute.create_firewall('name', {'ranges': '0.0.0.0/0'})

    body = self.request_body()
    self.assertEqual(body['sourceRanges'], ['0.0.0.0/0'])
    self.assertNotIn('ranges', body)

  def test_formats_tags_to_source_tags(self):
    self.compute.create_firewall('name', {'tags': 'tag'})

    body = self.request_body()
    self.assertEqual(body['sourceTags'], ['tag'])
    self.assertNotIn('tags', body)

  def test_does_not_modify_config(self):
    config = {
        'allowed': [{'IPProtocol': 'icmp'}],
        'protocols': {'ssh': 22},
        'ranges': ['10.0.0.0/8']
    }

    self.compute.create_firewall('name', config)

    self.assertEqual(config, {
        'allowed': [{'IPProtocol': 'icmp'}],
        'protocols': {'ssh': 22},
        'ranges': ['10.0.0.0/8']
    })

  def test_makes_the_correct_api_request(self):
    self.compute.create_firewall('new-firewall-name', {})

    self.compute.request.assert_called_once_with(
        'POST', '/global/firewalls', body={'name': 'new-firewall-name'})

  def test_error_carries_the_api_response(self):
    api_response = {'a': 'b', 'c': 'd'}
    self.compute.request.side_effect = error.ComputeError(
        'Error.', code=500, response=api_response)

    with self.assertRaises(error.ComputeError) as ctx:
      self.compute.create_firewall('name', {})
    self.assertIs(ctx.exception.response, api_response)

  def test_returns_firewall_operation_and_response(self):
    api_response = {'name': 'op-name'}
    self.compute.request.return_value = api_response

    fw, op, resp = self.compute.create_firewall('name', {})

    self.assertIsInstance(fw, firewall.Firewall)
    self.assertEqual(fw.name, 'name')
    self.assertIsInstance(op, operation.Operation)
    self.assertEqual(op.name, 'op-name')
    self.assertIs(op.metadata, api_response)
    self.assertIs(resp, api_response)


class CreateNetworkTest(ComputeTestCase):

  def test_requires_name_and_config(self):
    self.assertRaises(
        error.ConfigurationError, self.compute.create_network, '', {})
    self.assertRaises(
        error.ConfigurationError, self.compute.create_network, 'name', None)
    self.compute.request.assert_not_called()

  def test_sets_ipv4_range_and_gateway(self):
    self.compute.create_network(
        'name', {'range': '10.240.0.0/16', 'gateway': '10.1.1.1'})

    self.assertEqual(self.request_body(), {
        'name': 'name',
        'IPv4Range': '10.240.0.0/16',
        'gatewayIPv4': '10.1.1.1'
    })

  def test_makes_the_correct_api_request(self):
    self.compute.create_network('new-network', {})

    self.compute.request.assert_called_once_with(
        'POST', '/global/networks', body={'name': 'new-network'})

  def test_error_carries_the_api_response(self):
    api_response = {'a': 'b'}
    self.compute.request.side_effect = error.ComputeError(
        'Error.', response=api_response)

    with self.assertRaises(error.ComputeError) as ctx:
      self.compute.create_network('name', {})
    self.assertIs(ctx.exception.response, api_response)

  def test_returns_network_operation_and_response(self):
    net, op, resp = self.compute.create_network('name', {})

    self.assertIsInstance(net, network.Network)
    self.assertEqual(net.name, 'name')
    self.assertEqual(op.name, 'op-name')
    self.assertIs(op.metadata, resp)


class CreateServiceTest(ComputeTestCase):

  def test_makes_the_correct_api_request(self):
    self.compute.create_service('new-service', {})

    self.compute.request.assert_called_once_with(
        'POST', '/global/backendServices', body={'name': 'new-service'})

  def test_returns_service_operation_and_response(self):
    svc, op, resp = self.compute.create_service('new-service', {})

    self.assertIsInstance(svc, backend_service.BackendService)
    self.assertEqual(svc.name, 'new-service')
    self.assertEqual(op.name, 'op-name')
    self.assertIs(op.metadata, resp)

  def test_error_carries_the_api_response(self):
    api_response = {'a': 'b'}
    self.compute.request.side_effect = error.ComputeError(
        'Error.', response=api_response)

    with self.assertRaises(error.ComputeError) as ctx:
      self.compute.create_service('new-service', {})
    self.assertIs(ctx.exception.response, api_response)


class FactoryTest(ComputeTestCase):

  def test_returns_new_handles_bound_to_the_project(self):
    factories = [
        (self.compute.firewall, firewall.Firewall),
        (self.compute.network, network.Network),
        (self.compute.operation, operation.Operation),
        (self.compute.region, region.Region),
        (self.compute.service, backend_service.BackendService),
        (self.compute.snapshot, snapshot.Snapshot),
        (self.compute.zone, zone.Zone),
    ]
    for factory, resource_class in factories:
      first = factory('resource-name')
      second = factory('resource-name')
      self.assertIsInstance(first, resource_class)
      self.assertIs(first.parent, self.compute)
      self.assertEqual(first.name, 'resource-name')
      self.assertIsNot(first, second)

  def test_project_snapshot_cannot_be_created(self):
    self.assertFalse(hasattr(self.compute.snapshot('name'), 'create'))


class FlatListTest(ComputeTestCase):

  LISTS = [
      ('get_firewalls', '/global/firewalls', firewall.Firewall),
      ('get_networks', '/global/networks', network.Network),
      ('get_operations', '/global/operations', operation.Operation),
      ('get_regions', '/regions', region.Region),
      ('get_services', '/global/backendServices',
       backend_service.BackendService),
      ('get_snapshots', '/global/snapshots', snapshot.Snapshot),
      ('get_zones', '/zones', zone.Zone),
  ]

  def test_without_query_sends_an_empty_query(self):
    self.compute.request.return_value = {}
    for method, uri, _ in self.LISTS:
      getattr(self.compute, method)()
      self.compute.request.assert_called_with('GET', uri, qs={})

  def test_sends_the_query_verbatim(self):
    self.compute.request.return_value = {}
    query = {'maxResults': 5}
    for method, uri, _ in self.LISTS:
      getattr(self.compute, method)(query)
      self.assertEqual(self.compute.request.call_args[0], ('GET', uri))
      self.assertIs(self.compute.request.call_args[1]['qs'], query)

  def test_builds_resources_in_order(self):
    items = [{'name': 'first'}, {'name': 'second'}, {'name': 'third'}]
    api_response = {'items': items}
    self.compute.request.return_value = api_response
    for method, _, resource_class in self.LISTS:
      resources, next_query, resp = getattr(self.compute, method)({})

      self.assertEqual([r.name for r in resources],
                       ['first', 'second', 'third'])
      for resource, item in zip(resources, items):
        self.assertIsInstance(resource, resource_class)
        self.assertIs(resource.metadata, item)
      self.assertIsNone(next_query)
      self.assertIs(resp, api_response)

  def test_builds_a_next_query(self):
    self.compute.request.return_value = {
        'items': [], 'nextPageToken': 'next-page-token'}
    query = {'a': 'b', 'c': 'd'}
    for method, _, _ in self.LISTS:
      _, next_query, _ = getattr(self.compute, method)(query)

      self.assertEqual(query, {'a': 'b', 'c': 'd'})
      self.assertEqual(
          next_query, {'a': 'b', 'c': 'd', 'pageToken': 'next-page-token'})

  def test_error_returns_no_results(self):
    api_response = {'a': 'b', 'c': 'd'}
    self.compute.request.side_effect = error.ComputeError(
        'Error.', code=403, response=api_response)
    for method, _, _ in self.LISTS:
      with self.assertRaises(error.ComputeError) as ctx:
        getattr(self.compute, method)({})
      self.assertIs(ctx.exception.response, api_response)


class GetAddressesTest(ComputeTestCase):

  def test_makes_the_correct_api_request(self):
    self.compute.request.return_value = {}
    query = {}

    self.compute.get_addresses(query)

    self.compute.request.assert_called_once_with(
        'GET', '/aggregated/addresses', qs=query)
    self.assertIs(self.compute.request.call_args[1]['qs'], query)

  def test_accepts_no_query(self):
    self.compute.request.return_value = {}

    self.compute.get_addresses()

    self.compute.request.assert_called_once_with(
        'GET', '/aggregated/addresses', qs={})

  def test_creates_addresses_through_their_region(self):
    self.compute.request.return_value = {
        'items': {'regions/region-1': {'addresses': [{'name': 'address-1'}]}}
    }

    addresses, next_query, _ = self.compute.get_addresses()

    self.assertEqual(len(addresses), 1)
    self.assertEqual(addresses[0].name, 'address-1')
    self.assertIsInstance(addresses[0].region, region.Region)
    self.assertEqual(addresses[0].region.name, 'region-1')
    self.assertIsNone(next_query)

  def test_calls_region_then_address(self):
    self.compute.request.return_value = {
        'items': {'regions/region-1': {'addresses': [{'name': 'address-1'}]}}
    }
    fake_region = mock.Mock()
    self.compute.region = mock.Mock(return_value=fake_region)

    addresses, _, _ = self.compute.get_addresses()

    self.compute.region.assert_called_once_with('region-1')
    fake_region.address.assert_called_once_with('address-1')
    self.assertEqual(addresses, [fake_region.address.return_value])

  def test_builds_a_next_query(self):
    self.compute.request.return_value = {
        'items': {}, 'nextPageToken': 'next-page-token'}
    query = {'a': 'b', 'c': 'd'}

    _, next_query, _ = self.compute.get_addresses(query)

    self.assertEqual(query, {'a': 'b', 'c': 'd'})
    self.assertEqual(
        next_query, {'a': 'b', 'c': 'd', 'pageToken': 'next-page-token'})

  def test_error_carries_the_api_response(self):
    api_response = {'a': 'b', 'c': 'd'}
    self.compute.request.side_effect = error.ComputeError(
        'Error.', response=api_response)

    with self.assertRaises(error.ComputeError) as ctx:
      self.compute.get_addresses({})
    self.assertIs(ctx.exception.response, api_response)


class GetAutoscalersTest(ComputeTestCase):

  API_RESPONSE = {
      'items': {
          'not-zone-name': {'autoscalers': [{'name': 'autoscaler-1'}]},
          'zones/us-central1-a': {'autoscalers': [{'name': 'autoscaler-1'}]}
      }
  }

  def test_makes_the_correct_api_request(self):
    self.compute.request.return_value = {}

    self.compute.get_autoscalers()

    self.compute.request.assert_called_once_with(
        'GET', '/aggregated/autoscalers', qs={})

  def test_creates_autoscalers_through_their_zone(self):
    self.compute.request.return_value = self.API_RESPONSE
    fake_zone = mock.Mock()
    self.compute.zone = mock.Mock(return_value=fake_zone)

    self.compute.get_autoscalers()

    self.compute.zone.assert_called_once_with('us-central1-a')
    fake_zone.autoscaler.assert_called_once_with('autoscaler-1')

  def test_does_not_create_zoneless_autoscalers(self):
    self.compute.request.return_value = self.API_RESPONSE

    autoscalers, _, _ = self.compute.get_autoscalers()

    self.assertEqual(len(autoscalers), 1)
    self.assertEqual(autoscalers[0].zone.name, 'us-central1-a')

  def test_no_matching_groups_yields_no_results(self):
    self.compute.request.return_value = {
        'items': {'regions/us-central1': {'autoscalers': [{'name': 'a'}]}}}

    autoscalers, _, _ = self.compute.get_autoscalers()

    self.assertEqual(autoscalers, [])

  def test_builds_a_next_query_without_items(self):
    self.compute.request.return_value = {'nextPageToken': 'next-page-token'}
    query = {'a': 'b', 'c': 'd'}

    autoscalers, next_query, _ = self.compute.get_autoscalers(query)

    self.assertEqual(autoscalers, [])
    self.assertEqual(query, {'a': 'b', 'c': 'd'})
    self.assertEqual(
        next_query, {'a': 'b', 'c': 'd', 'pageToken': 'next-page-token'})


class GetDisksTest(ComputeTestCase):

  def test_makes_the_correct_api_request(self):
    self.compute.request.return_value = {}

    self.compute.get_disks()

    self.compute.request.assert_called_once_with(
        'GET', '/aggregated/disks', qs={})

  def test_creates_disks_through_their_zone(self):
    self.compute.request.return_value = {
        'items': {
            'zones/zone-1': {'disks': [{'name': 'disk-1'}, {'name': 'disk-2'}]},
            'zones/zone-2': {'warning': {'code': 'NO_RESULTS_ON_PAGE'}}
        }
    }

    disks, _, _ = self.compute.get_disks()

    self.assertEqual([d.name for d in disks], ['disk-1', 'disk-2'])
    self.assertEqual(disks[0].zone.name, 'zone-1')
    self.assertEqual(disks[0].metadata, {'name': 'disk-1'})


class GetVMsTest(ComputeTestCase):

  def test_makes_the_correct_api_request(self):
    self.compute.request.return_value = {}

    self.compute.get_vms()

    self.compute.request.assert_called_once_with(
        'GET', '/aggregated/instances', qs={})

  def test_creates_vms_through_their_zone(self):
    self.compute.request.return_value = {
        'items': {'zones/zone-1': {'instances': [{'name': 'vm-1'}]}},
        'nextPageToken': 'token'
    }

    vms, next_query, _ = self.compute.get_vms({'maxResults': 1})

    self.assertEqual(vms[0].name, 'vm-1')
    self.assertEqual(vms[0].zone.name, 'zone-1')
    self.assertEqual(next_query, {'maxResults': 1, 'pageToken': 'token'})

  def test_error_carries_the_api_response(self):
    api_response = {'error': {'code': 500}}
    self.compute.request.side_effect = error.ComputeError(
        'Error.', code=500, response=api_response)

    with self.assertRaises(error.ComputeError) as ctx:
      self.compute.get_vms()
    self.assertEqual(ctx.exception.code, 500)
    self.assertIs(ctx.exception.response, api_response)


if __name__ == '__main__':
  unittest.main()
