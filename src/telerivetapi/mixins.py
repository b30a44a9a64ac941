import logging
from abc import ABC, abstractmethod
from collections.abc import MutableMapping
from typing import TYPE_CHECKING, Any, Dict, Iterator, Union

if TYPE_CHECKING:
    from telerivetapi import telerivet_api

logger = logging.getLogger(__name__)


class CustomVars(MutableMapping):

    def __init__(self, data: Dict[str, Any] = None) -> None:
        self._data: Dict[str, Any] = dict(data or {})
        self._dirty: Dict[str, Any] = {}

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._data[key] = value
        self._dirty[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]
        # the API removes a variable when it is set to null
        self._dirty[key] = None

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f'CustomVars({self._data!r})'

    def _update(self, new_data: Dict[str, Any]) -> None:
        self._data.update(new_data)
        for key, value in self._dirty.items():
            if value is None:
                self._data.pop(key, None)
            else:
                self._data[key] = value

    def get_dirty_variables(self) -> Dict[str, Any]:
        return dict(self._dirty)

    def clear_dirty_variables(self) -> None:
        self._dirty.clear()

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._data)


# noinspection PyProtectedMember
class ApiObject(ABC):

    def __init__(self, api: 'telerivet_api.TelerivetAPI', data: Dict[str, Any] = None, is_loaded: bool = True):
        self._api: 'telerivet_api.TelerivetAPI' = api
        self._data: Dict[str, Any] = dict(data or {})
        self._dirty: Dict[str, Any] = {}
        self._is_loaded: bool = is_loaded
        self._vars: CustomVars = CustomVars(self._data.pop('vars', None))

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.to_dict()!r})'

    @abstractmethod
    def get_base_api_path(self) -> str:
        pass

    def _get(self, name: str) -> Any:
        if name in self._data:
            return self._data[name]
        if not self._is_loaded:
            self.load()
            return self._data.get(name)
        return None

    def _set(self, name: str, value: Any) -> None:
        self._data[name] = value
        self._dirty[name] = value

    def _update(self, new_data: Dict[str, Any]) -> None:
        new_data = dict(new_data or {})
        new_vars = new_data.pop('vars', None)
        self._data.update(new_data)
        self._data.update(self._dirty)
        if new_vars is not None:
            self._vars._update(new_vars)

    @property
    def id(self) -> str:
        return self._data.get('id')

    @property
    def is_loaded(self) -> bool:
        return self._is_loaded

    @property
    def vars(self) -> CustomVars:
        return self._vars

    def is_dirty(self) -> bool:
        return bool(self._dirty) or bool(self._vars.get_dirty_variables())

    def load(self) -> 'ApiObject':
        logger.debug('Load %s %s', type(self).__name__, self.id)
        self._update(self._api.do_request('GET', self.get_base_api_path()))
        self._is_loaded = True
        return self

    def save(self) -> None:
        data = dict(self._dirty)
        dirty_vars = self._vars.get_dirty_variables()
        if dirty_vars:
            data['vars'] = dirty_vars
        logger.debug('Save %s %s: %s', type(self).__name__, self.id, sorted(data))
        self._api.do_request('POST', self.get_base_api_path(), data)
        self._dirty.clear()
        self._vars.clear_dirty_variables()

    def to_dict(self) -> Dict[str, Any]:
        res = dict(self._data)
        if self._vars:
            res['vars'] = self._vars.to_dict()
        return res


class ProjectObject(ApiObject):
    collection: str = ''

    @property
    def project_id(self) -> Union[None, str]:
        return self._data.get('project_id')

    def get_base_api_path(self) -> str:
        return f'/projects/{self.project_id}/{self.collection}/{self.id}'


# noinspection PyProtectedMember
class Deletable:

    def delete(self: ApiObject) -> None:
        logger.debug('Delete %s %s', type(self).__name__, self.id)
        self._api.do_request('DELETE', self.get_base_api_path())
