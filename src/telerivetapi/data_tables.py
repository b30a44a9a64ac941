from typing import Union

from telerivetapi.mixins import Deletable, ProjectObject


class DataTable(Deletable, ProjectObject):
    collection = 'tables'

    @property
    def name(self) -> Union[None, str]:
        return self._get('name')

    @name.setter
    def name(self, value: str) -> None:
        self._set('name', value)

    @property
    def num_rows(self) -> int:
        return self._get('num_rows') or 0
