from typing import List, Union

from telerivetapi.mixins import Deletable, ProjectObject


class Message(Deletable, ProjectObject):
    collection = 'messages'

    @property
    def starred(self) -> bool:
        return bool(self._get('starred'))

    @starred.setter
    def starred(self, value: bool) -> None:
        self._set('starred', value)

    @property
    def direction(self) -> Union[None, str]:
        return self._get('direction')

    @property
    def status(self) -> Union[None, str]:
        return self._get('status')

    @property
    def message_type(self) -> Union[None, str]:
        return self._get('message_type')

    @property
    def source(self) -> Union[None, str]:
        return self._get('source')

    @property
    def time_created(self) -> Union[None, int]:
        return self._get('time_created')

    @property
    def time_sent(self) -> Union[None, int]:
        return self._get('time_sent')

    @property
    def from_number(self) -> Union[None, str]:
        return self._get('from_number')

    @property
    def to_number(self) -> Union[None, str]:
        return self._get('to_number')

    @property
    def content(self) -> Union[None, str]:
        return self._get('content')

    @property
    def simulated(self) -> bool:
        return bool(self._get('simulated'))

    @property
    def label_ids(self) -> List[str]:
        return self._get('label_ids') or []

    @property
    def error_message(self) -> Union[None, str]:
        return self._get('error_message')

    @property
    def external_id(self) -> Union[None, str]:
        return self._get('external_id')

    @property
    def price(self) -> Union[None, float]:
        return self._get('price')

    @property
    def price_currency(self) -> Union[None, str]:
        return self._get('price_currency')

    @property
    def contact_id(self) -> Union[None, str]:
        return self._get('contact_id')

    @property
    def phone_id(self) -> Union[None, str]:
        return self._get('phone_id')

    @property
    def service_id(self) -> Union[None, str]:
        return self._get('service_id')

    @property
    def route_id(self) -> Union[None, str]:
        return self._get('route_id')
