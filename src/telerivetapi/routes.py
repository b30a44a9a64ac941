from typing import Union

from telerivetapi.mixins import ProjectObject


class Route(ProjectObject):
    collection = 'routes'

    @property
    def name(self) -> Union[None, str]:
        return self._get('name')

    @name.setter
    def name(self, value: str) -> None:
        self._set('name', value)
