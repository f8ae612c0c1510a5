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

"""Authorized transport and base classes shared by all resource objects."""

import json
import logging
import os

from googleapiclient import errors as api_errors
from googleapiclient import http
from googleapiclient import model
import httplib2
from oauth2client import client
from oauth2client import service_account

from gcompute import gce_exception as error
from gcompute import util

GCE_URL = 'https://www.googleapis.com/compute'
PROJECT_ENV_VAR = 'GCLOUD_PROJECT'


class Service(object):
  """An authorized connection to the Compute Engine API for one project.

  Attributes:
    settings: Dictionary of settings as set in the settings.json file.
    gce_url: The string URL of the Compute Engine API endpoint.
    project_id: A string name for the Compute Engine project.
    scopes: A list of string OAuth 2.0 scopes requested for the credentials.
  """

  def __init__(self, project_id=None, credentials=None, key_filename=None,
               settings=None):
    """Initializes the Service class.

    Args:
      project_id: A string name for the Compute Engine project. Falls back to
          the 'project' setting and then the GCLOUD_PROJECT environment
          variable.
      credentials: An oauth2client.client.Credentials object, or a dictionary
          holding a service account JSON key.
      key_filename: The string path to a service account JSON key file.
      settings: A dictionary of settings overriding those in settings.json.

    Raises:
      MissingProjectIdError: No project id could be found.
    """

    self.settings = util.load_settings(settings)
    self.gce_url = '%s/%s' % (GCE_URL, self.settings['compute']['api_version'])
    self.scopes = list(self.settings['compute']['scopes'])

    self.project_id = (project_id or self.settings.get('project') or
                       os.environ.get(PROJECT_ENV_VAR))
    if not self.project_id:
      raise error.MissingProjectIdError(
          'Sorry, we cannot connect to Compute Engine without a project ID.')

    self._credentials = credentials
    self._key_filename = key_filename
    self._http = None
    self._model = model.JsonModel()

  @property
  def http(self):
    """The authorized httplib2.Http instance, created on first use."""

    if self._http is None:
      self._http = self._auth_http(self._get_credentials())
    return self._http

  def request(self, method, uri, body=None, qs=None):
    """Send an authorized request relative to the project URL.

    Args:
      method: The string HTTP method.
      uri: The string path relative to the project, ex: '/global/firewalls'.
      body: An optional dictionary sent as the JSON request body.
      qs: An optional dictionary of query string parameters. Not modified.

    Returns:
      The decoded JSON response.

    Raises:
      ComputeError: Raised when API call fails.
      TokenError: Raised when the access token fails to refresh.
    """

    url = '%s/projects/%s%s' % (self.gce_url, self.project_id, uri)
    headers, _, query, payload = self._model.request(
        {}, {}, dict(qs or {}), body)
    logging.debug('%s %s%s', method, url, query)
    request = http.HttpRequest(
        self.http, self._model.response, url + query,
        method=method, body=payload, headers=headers)
    return self._run_request(request)

  def _run_request(self, request):
    """Run API request and handle any errors.

    Args:
      request: A googleapiclient.http.HttpRequest object.

    Returns:
      Dictionary results of the API call.

    Raises:
      ComputeError: Raised if API call fails.
      TokenError: Raised if there's a failure refreshing the access token.
    """

    try:
      return request.execute()
    except api_errors.HttpError as e:
      logging.error(e)
      response = _decode_error_content(e.content)
      message = 'HttpError: %s %s' % (e.resp.status, e.resp.reason)
      if response and isinstance(response.get('error'), dict):
        message = response['error'].get('message', message)
      raise error.ComputeError(message, code=e.resp.status, response=response)
    except httplib2.HttpLib2Error as e:
      logging.error(e)
      raise error.ComputeError('Transport Error occurred')
    except client.AccessTokenRefreshError as e:
      logging.error(e)
      raise error.TokenError('Access Token refresh error')

  def _get_credentials(self):
    """Resolve the credentials used to authorize requests.

    Returns:
      An oauth2client.client.Credentials object.

    Raises:
      ConfigurationError: No credentials were given and application default
          credentials are not available.
    """

    if isinstance(self._credentials, dict):
      return service_account.ServiceAccountCredentials.from_json_keyfile_dict(
          self._credentials, scopes=self.scopes)
    if self._credentials is not None:
      return self._credentials
    if self._key_filename:
      return service_account.ServiceAccountCredentials.from_json_keyfile_name(
          self._key_filename, scopes=self.scopes)

    try:
      credentials = client.GoogleCredentials.get_application_default()
    except client.ApplicationDefaultCredentialsError as e:
      logging.error(e)
      raise error.ConfigurationError(
          'No credentials were provided and application default credentials '
          'are not available.')
    if credentials.create_scoped_required():
      credentials = credentials.create_scoped(self.scopes)
    return credentials

  def _auth_http(self, credentials):
    """Authorize an instance of httplib2.Http using credentials.

    Args:
      credentials: An oauth2client.client.Credentials object.

    Returns:
      An authorized instance of httplib2.Http.
    """

    http_client = httplib2.Http(timeout=self.settings['compute']['timeout'])
    return credentials.authorize(http_client)


def _decode_error_content(content):
  if not content:
    return None
  if isinstance(content, bytes):
    content = content.decode('utf-8', 'replace')
  try:
    return json.loads(content)
  except ValueError:
    return {'message': content}


class ServiceObject(object):
  """A named API resource owned by the project or by another resource.

  Subclasses set base_url to the collection path of the resource, relative to
  the parent, and mix in the capabilities the resource supports.

  Attributes:
    parent: The Service or ServiceObject that owns this resource.
    name: The string name of the resource.
    metadata: The dictionary last returned by the API for this resource.
  """

  base_url = None

  def __init__(self, parent, name):
    self.parent = parent
    self.name = name
    self.metadata = {}

  def __repr__(self):
    return '<%s %s%s/%s>' % (
        self.__class__.__name__, self.parent_path(), self.base_url, self.name)

  def parent_path(self):
    """The string path of the parent, relative to the project."""

    if isinstance(self.parent, ServiceObject):
      return '%s%s/%s' % (
          self.parent.parent_path(), self.parent.base_url, self.parent.name)
    return ''

  def request(self, method, uri='', body=None, qs=None):
    """Send a request relative to this resource's own URL.

    Args:
      method: The string HTTP method.
      uri: The string path relative to the resource, ex: '/start'.
      body: An optional dictionary sent as the JSON request body.
      qs: An optional dictionary of query string parameters.

    Returns:
      The decoded JSON response.
    """

    uri = '%s/%s%s' % (self.base_url, self.name, uri)
    return self.parent.request(method, uri, body=body, qs=qs)

  def _delete(self):
    return self.request('DELETE')

  def _wrap_operation(self, owner, response):
    operation = owner.operation(response['name'])
    operation.metadata = response
    return operation


class GetMetadataMixin(object):
  """Adds get_metadata() to a ServiceObject."""

  def get_metadata(self):
    """Get the resource's metadata.

    Returns:
      A tuple of (metadata, api_response).

    Raises:
      ComputeError: Raised when API call fails.
    """

    response = self.request('GET')
    self.metadata = response
    return self.metadata, response


class ExistsMixin(object):
  """Adds exists() to a ServiceObject with get_metadata()."""

  def exists(self):
    """Check if the resource exists.

    Returns:
      True if the resource exists, False if the API answered 404.

    Raises:
      ComputeError: Raised when API call fails for any other reason.
    """

    try:
      self.get_metadata()
    except error.ComputeError as e:
      if e.code == 404:
        return False
      raise
    return True


class CreateMixin(object):
  """Adds create() to a ServiceObject.

  The resource must set create_method to a callable taking (name, config) and
  returning (resource, operation, api_response).
  """

  create_method = None

  def create(self, config=None):
    """Create the resource.

    Args:
      config: A dictionary describing the resource.

    Returns:
      A tuple of (resource, operation, api_response).
    """

    return self.create_method(self.name, config or {})


class GetMixin(object):
  """Adds get() to a ServiceObject with get_metadata()."""

  def get(self, auto_create=False, config=None):
    """Get the resource if it exists.

    Args:
      auto_create: If True and the resource supports create(), create it when
          the API answers 404.
      config: The dictionary passed to create() when auto-creating.

    Returns:
      A tuple of (resource, api_response).

    Raises:
      ComputeError: Raised when API call fails.
    """

    try:
      _, response = self.get_metadata()
    except error.ComputeError as e:
      if e.code != 404 or not auto_create or not isinstance(self, CreateMixin):
        raise
      logging.info('%r not found, creating it', self)
      resource, _, response = self.create(config)
      return resource, response
    return self, response


class DeleteMixin(object):
  """Adds delete() returning an Operation to a ServiceObject.

  The resource must provide operation_owner, the object whose operation()
  factory builds operations for it.
  """

  def delete(self):
    """Delete the resource.

    Returns:
      A tuple of (operation, api_response).

    Raises:
      ComputeError: Raised when API call fails.
    """

    response = self._delete()
    return self._wrap_operation(self.operation_owner, response), response


class CollectionMixin(object):
  """Lists and inserts the resources of a collection owned by this object."""

  def _list(self, uri, query, make_resource):
    """List one page of a flat resource collection.

    Args:
      uri: The string collection path, relative to this object.
      query: A dictionary query, or None. Not modified.
      make_resource: A callable taking a string name and returning a new
          resource object.

    Returns:
      A tuple of (resources, next_query, api_response).

    Raises:
      ComputeError: Raised when API call fails.
    """

    if query is None:
      query = {}
    response = self.request('GET', uri, qs=query)

    resources = []
    for item in response.get('items', []):
      resources.append(_with_metadata(make_resource(item['name']), item))
    return resources, util.make_next_query(query, response), response

  def _list_aggregated(self, uri, query, scope, kind, make_resource):
    """List one page of an aggregated resource collection.

    Groups whose key is not '<scope>/<name>' are skipped.

    Args:
      uri: The string collection path, ex: '/aggregated/disks'.
      query: A dictionary query, or None. Not modified.
      scope: The string location type, either 'zones' or 'regions'.
      kind: The string field holding the records of each group, ex: 'disks'.
      make_resource: A callable taking a location object and a string name and
          returning a new resource object.

    Returns:
      A tuple of (resources, next_query, api_response).

    Raises:
      ComputeError: Raised when API call fails.
    """

    if query is None:
      query = {}
    response = self.request('GET', uri, qs=query)

    locate = self.zone if scope == 'zones' else self.region
    resources = []
    for key, group in response.get('items', {}).items():
      location_name = util.parse_location_key(key, scope)
      if location_name is None:
        logging.debug('Skipping aggregated group %s', key)
        continue
      location = locate(location_name)
      for item in group.get(kind, []):
        resources.append(
            _with_metadata(make_resource(location, item['name']), item))
    return resources, util.make_next_query(query, response), response

  def _insert(self, uri, body, make_resource):
    """Create a resource by posting it to its collection.

    Args:
      uri: The string collection path, relative to this object.
      body: The dictionary JSON body, holding at least the resource name.
      make_resource: A callable taking a string name and returning a new
          resource object.

    Returns:
      A tuple of (resource, operation, api_response).

    Raises:
      ComputeError: Raised when API call fails.
    """

    response = self.request('POST', uri, body=body)
    resource = make_resource(body['name'])
    operation = self.operation(response['name'])
    operation.metadata = response
    return resource, operation, response


def _with_metadata(resource, item):
  resource.metadata = item
  return resource
