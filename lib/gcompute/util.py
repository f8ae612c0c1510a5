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

"""Helpers shared by the Compute Engine resource classes."""

import copy
import json
import logging
import os
import re

SETTINGS_FILE = os.path.join(os.path.dirname(__file__), 'settings.json')

LOCATION_KEY_RE = re.compile(r'^(zones|regions)/(.+)$')


def load_settings(settings=None):
  """Loads the packaged settings.json and applies any overrides.

  Args:
    settings: A dictionary of settings. Nested dictionaries are merged key by
        key into the defaults, anything else replaces the default value.

  Returns:
    A new dictionary of settings.
  """

  with open(SETTINGS_FILE, 'r') as settings_file:
    merged = json.loads(settings_file.read())
  if settings:
    _merge(merged, settings)
  return merged


def _merge(target, overrides):
  for key, value in overrides.items():
    if isinstance(value, dict) and isinstance(target.get(key), dict):
      _merge(target[key], value)
    else:
      target[key] = copy.deepcopy(value)


def to_list(value):
  """Coerces a value into a list.

  None becomes an empty list, lists and tuples are copied, anything else is
  wrapped in a single element list.
  """

  if value is None:
    return []
  if isinstance(value, (list, tuple)):
    return list(value)
  return [value]


def make_next_query(query, response):
  """Build the query for the next page of a list request.

  Args:
    query: The dictionary query used for the current page. Not modified.
    response: The decoded API response for the current page.

  Returns:
    A copy of query with pageToken set, or None if there are no more pages.
  """

  token = response.get('nextPageToken')
  if not token:
    return None
  next_query = dict(query)
  next_query['pageToken'] = token
  return next_query


def parse_location_key(key, scope):
  """Extract the location name from an aggregated list key.

  Args:
    key: A string key from an aggregated response, ex: 'zones/us-central1-a'.
    scope: The expected prefix, either 'zones' or 'regions'.

  Returns:
    The string location name, or None if the key is not under scope.
  """

  match = LOCATION_KEY_RE.match(key)
  if not match or match.group(1) != scope:
    return None
  return match.group(2)


def paginate(list_method, query=None):
  """Iterate over every resource returned by a get_* method.

  Follows next_query until the API stops returning a page token.

  Args:
    list_method: A bound list accessor, ex: compute.get_firewalls.
    query: An optional dictionary query for the first page.

  Yields:
    Resource objects, in the order the API returned them.
  """

  while True:
    resources, query, _ = list_method(query)
    for resource in resources:
      yield resource
    if query is None:
      return
    logging.debug('Fetching next page with token %s', query['pageToken'])
