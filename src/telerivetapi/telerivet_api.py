import logging
from typing import Any, Dict, Type, TypeVar, Union

import requests

from telerivetapi.consts import API_URL, USER_AGENT
from telerivetapi.cursor import APICursor
from telerivetapi.errors import ERROR_CODES, TelerivetApiError
from telerivetapi.mixins import ApiObject
from telerivetapi.params import encode_params
from telerivetapi.projects import Project

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=ApiObject)


class TelerivetAPI:

    def __init__(self, api_key: str, api_url: str = API_URL, timeout: Union[None, float] = None) -> None:
        self._api_key: str = api_key
        self._api_url: str = api_url.rstrip('/')
        self._timeout: Union[None, float] = timeout
        self._session: requests.Session = requests.Session()
        self._session.auth = (api_key, '')
        self._session.headers['User-Agent'] = USER_AGENT
        self.num_requests: int = 0

    def do_request(self, method: str, path: str, params: Dict[str, Any] = None) -> Any:
        url = self._api_url + path
        self.num_requests += 1
        logger.debug('Telerivet request %s %s', method, path)
        if method in ('GET', 'DELETE'):
            result = self._session.request(method, url, params=encode_params(params), timeout=self._timeout)
        else:
            result = self._session.request(method, url, json=params, timeout=self._timeout)

        if result.status_code >= 400:
            self._raise_error(method, path, result)

        if not result.content:
            return None
        return result.json()

    @staticmethod
    def _raise_error(method: str, path: str, result: requests.Response) -> None:
        try:
            parsed = result.json()
        except ValueError:
            parsed = None
        error = parsed.get('error') if isinstance(parsed, dict) else None
        if not isinstance(error, dict):
            logger.warning('Telerivet request %s %s failed with HTTP %s', method, path, result.status_code)
            raise TelerivetApiError(f'HTTP {result.status_code}: {result.text}', status_code=result.status_code)

        code = error.get('code')
        logger.warning('Telerivet request %s %s failed: %s %s', method, path, code, error.get('message'))
        error_class = ERROR_CODES.get(code, TelerivetApiError)
        raise error_class(
            error.get('message', ''),
            code=code,
            param=error.get('param'),
            status_code=result.status_code,
        )

    def cursor(self, entity_type: Type[T], path: str, options: Dict[str, Any] = None) -> APICursor[T]:
        return APICursor(self, entity_type, path, options)

    def get_project_by_id(self, id: str) -> Project:
        return Project(self, self.do_request('GET', f'/projects/{id}'))

    def init_project_by_id(self, id: str) -> Project:
        return Project(self, {'id': id}, False)

    def query_projects(self, options: Dict[str, Any] = None) -> APICursor[Project]:
        return self.cursor(Project, '/projects', options)

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> 'TelerivetAPI':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

