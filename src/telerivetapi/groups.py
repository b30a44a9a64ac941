from typing import Union

from telerivetapi.mixins import Deletable, ProjectObject


class Group(Deletable, ProjectObject):
    collection = 'groups'

    @property
    def name(self) -> Union[None, str]:
        return self._get('name')

    @name.setter
    def name(self, value: str) -> None:
        self._set('name', value)

    @property
    def num_members(self) -> int:
        return self._get('num_members') or 0

    @property
    def time_created(self) -> Union[None, int]:
        return self._get('time_created')
