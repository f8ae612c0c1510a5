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

"""Exceptions raised by the Compute Engine resource client."""


class Error(Exception):
  """Base class for all errors raised by this library."""


class ConfigurationError(Error, ValueError):
  """A required argument or configuration value is missing or invalid.

  Raised before any request is sent.
  """


class MissingProjectIdError(ConfigurationError):
  """No project id could be resolved for the Compute facade."""


class ComputeError(Error):
  """An API call failed.

  Attributes:
    message: The string error message.
    code: The integer HTTP status code, or None for transport failures.
    response: The decoded API response body, if any was returned.
  """

  def __init__(self, message, code=None, response=None):
    super(ComputeError, self).__init__(message)
    self.message = message
    self.code = code
    self.response = response


class TokenError(ComputeError):
  """The access token could not be refreshed."""


class OperationError(ComputeError):
  """A Compute Engine operation finished with an error."""
