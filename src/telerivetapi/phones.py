from typing import Union

from telerivetapi.mixins import ProjectObject


class Phone(ProjectObject):
    collection = 'phones'

    @property
    def name(self) -> Union[None, str]:
        return self._get('name')

    @name.setter
    def name(self, value: str) -> None:
        self._set('name', value)

    @property
    def send_paused(self) -> bool:
        return bool(self._get('send_paused'))

    @send_paused.setter
    def send_paused(self, value: bool) -> None:
        self._set('send_paused', value)

    @property
    def phone_number(self) -> Union[None, str]:
        return self._get('phone_number')

    @property
    def phone_type(self) -> Union[None, str]:
        return self._get('phone_type')

    @property
    def country(self) -> Union[None, str]:
        return self._get('country')

    @property
    def time_created(self) -> Union[None, int]:
        return self._get('time_created')

    @property
    def last_active_time(self) -> Union[None, int]:
        return self._get('last_active_time')

    @property
    def battery(self) -> Union[None, int]:
        return self._get('battery')

    @property
    def charging(self) -> Union[None, bool]:
        return self._get('charging')

    @property
    def app_version(self) -> Union[None, str]:
        return self._get('app_version')
