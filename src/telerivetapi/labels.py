from typing import Union

from telerivetapi.mixins import Deletable, ProjectObject


class Label(Deletable, ProjectObject):
    collection = 'labels'

    @property
    def name(self) -> Union[None, str]:
        return self._get('name')

    @name.setter
    def name(self, value: str) -> None:
        self._set('name', value)

    @property
    def time_created(self) -> Union[None, int]:
        return self._get('time_created')
