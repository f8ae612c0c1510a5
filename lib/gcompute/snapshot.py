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

"""Compute Engine snapshots, owned by the project or taken from a disk."""

from gcompute import service


class Snapshot(service.GetMetadataMixin, service.ExistsMixin,
               service.GetMixin, service.DeleteMixin, service.ServiceObject):
  """A class representing a GCE Snapshot resource reached from the project.

  Snapshots are global, so requests are always sent under the project even
  when the snapshot was reached through a Disk.

  Attributes:
    compute: The Compute object of the project.
    name: The string name of the snapshot.
    metadata: The dictionary last returned by the API for the snapshot.
  """

  base_url = '/global/snapshots'

  def __init__(self, compute, name):
    """Initialize the Snapshot class.

    Args:
      compute: The Compute object of the project.
      name: The string name of the snapshot.
    """

    super(Snapshot, self).__init__(compute, name)
    self.compute = compute
    self.operation_owner = compute


class DiskSnapshot(service.CreateMixin, Snapshot):
  """A Snapshot reached through the Disk it is taken from.

  Unlike a project Snapshot it can be created, by snapshotting the disk.

  Attributes:
    disk: The Disk object the snapshot is taken from.
  """

  def __init__(self, disk, name):
    """Initialize the DiskSnapshot class.

    Args:
      disk: The Disk object the snapshot is taken from.
      name: The string name of the snapshot.
    """

    super(DiskSnapshot, self).__init__(disk.compute, name)
    self.disk = disk
    self.create_method = disk.create_snapshot
