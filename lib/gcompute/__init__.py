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

"""Client library for Google Compute Engine resources."""

from gcompute.gce import Compute
from gcompute.gce_exception import ComputeError
from gcompute.gce_exception import ConfigurationError
from gcompute.gce_exception import Error
from gcompute.gce_exception import MissingProjectIdError
from gcompute.gce_exception import OperationError
from gcompute.gce_exception import TokenError
from gcompute.util import paginate

__version__ = '0.1.0'
