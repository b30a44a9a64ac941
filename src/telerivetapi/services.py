from typing import List, Union

from telerivetapi.mixins import ProjectObject


class Service(ProjectObject):
    collection = 'services'

    @property
    def name(self) -> Union[None, str]:
        return self._get('name')

    @name.setter
    def name(self, value: str) -> None:
        self._set('name', value)

    @property
    def active(self) -> bool:
        return bool(self._get('active'))

    @active.setter
    def active(self, value: bool) -> None:
        self._set('active', value)

    @property
    def priority(self) -> Union[None, int]:
        return self._get('priority')

    @priority.setter
    def priority(self, value: int) -> None:
        self._set('priority', value)

    @property
    def contexts(self) -> List[str]:
        return self._get('contexts') or []

    @property
    def service_type(self) -> Union[None, str]:
        return self._get('service_type')
