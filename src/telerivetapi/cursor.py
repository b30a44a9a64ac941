import logging
from typing import TYPE_CHECKING, Any, Dict, Generic, Iterator, List, Type, TypeVar, Union

from telerivetapi.consts import DEFAULT_PAGE_SIZE
from telerivetapi.mixins import ApiObject

if TYPE_CHECKING:
    from telerivetapi import telerivet_api

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=ApiObject)


# noinspection PyProtectedMember
class APICursor(Generic[T]):

    def __init__(self, api: 'telerivet_api.TelerivetAPI', entity_type: Type[T], path: str,
                 params: Dict[str, Any] = None) -> None:
        self._api: 'telerivet_api.TelerivetAPI' = api
        self._entity_type: Type[T] = entity_type
        self._path: str = path
        self._params: Dict[str, Any] = dict(params or {})
        self._page_size: int = int(self._params.pop('page_size', DEFAULT_PAGE_SIZE))
        self._offset: int = int(self._params.pop('offset', 0))
        self._limit: Union[None, int] = None
        self._num_fetched: int = 0
        self._exhausted: bool = False

    def __iter__(self) -> Iterator[T]:
        while self._limit is None or self._num_fetched < self._limit:
            page = self._next_page()
            if not page:
                return
            for item in page:
                if self._limit is not None and self._num_fetched >= self._limit:
                    return
                self._num_fetched += 1
                yield self._entity_type(self._api, item)

    def _next_page(self) -> List[Dict[str, Any]]:
        if self._exhausted:
            return []
        page_size = self._page_size
        if self._limit is not None:
            page_size = min(page_size, self._limit - self._num_fetched)
        request_params = dict(self._params)
        request_params['page_size'] = page_size
        request_params['offset'] = self._offset
        logger.debug('Fetch page of %s (offset=%s, page_size=%s)', self._path, self._offset, page_size)
        response = self._api.do_request('GET', self._path, request_params) or {}
        data = response.get('data') or []
        self._offset += len(data)
        if not response.get('truncated') or not data:
            self._exhausted = True
        return data

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def offset(self) -> int:
        return self._offset

    def limit(self, limit: int) -> 'APICursor[T]':
        self._limit = limit
        return self

    def count(self) -> int:
        request_params = dict(self._params)
        request_params['count'] = 1
        response = self._api.do_request('GET', self._path, request_params)
        return response['count']

    def all(self) -> List[T]:
        return list(self)
