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

"""A Compute Engine static IP address."""

from gcompute import service


class Address(service.GetMetadataMixin, service.ExistsMixin,
              service.CreateMixin, service.GetMixin, service.DeleteMixin,
              service.ServiceObject):
  """A class representing a GCE Address resource.

  Attributes:
    region: The Region object the address is reserved in.
    compute: The Compute object of the project.
    name: The string name of the address.
  """

  base_url = '/addresses'

  def __init__(self, region, name):
    super(Address, self).__init__(region, name)
    self.region = region
    self.compute = region.compute
    self.operation_owner = region
    self.create_method = region.create_address
