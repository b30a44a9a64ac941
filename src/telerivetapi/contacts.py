from typing import List, Union

from telerivetapi.mixins import Deletable, ProjectObject


class Contact(Deletable, ProjectObject):
    collection = 'contacts'

    @property
    def name(self) -> Union[None, str]:
        return self._get('name')

    @name.setter
    def name(self, value: str) -> None:
        self._set('name', value)

    @property
    def phone_number(self) -> Union[None, str]:
        return self._get('phone_number')

    @phone_number.setter
    def phone_number(self, value: str) -> None:
        self._set('phone_number', value)

    @property
    def send_blocked(self) -> bool:
        return bool(self._get('send_blocked'))

    @send_blocked.setter
    def send_blocked(self, value: bool) -> None:
        self._set('send_blocked', value)

    @property
    def conversation_status(self) -> Union[None, str]:
        return self._get('conversation_status')

    @conversation_status.setter
    def conversation_status(self, value: str) -> None:
        self._set('conversation_status', value)

    @property
    def default_route_id(self) -> Union[None, str]:
        return self._get('default_route_id')

    @default_route_id.setter
    def default_route_id(self, value: str) -> None:
        self._set('default_route_id', value)

    @property
    def time_created(self) -> Union[None, int]:
        return self._get('time_created')

    @property
    def time_updated(self) -> Union[None, int]:
        return self._get('time_updated')

    @property
    def last_message_time(self) -> Union[None, int]:
        return self._get('last_message_time')

    @property
    def last_incoming_message_time(self) -> Union[None, int]:
        return self._get('last_incoming_message_time')

    @property
    def last_outgoing_message_time(self) -> Union[None, int]:
        return self._get('last_outgoing_message_time')

    @property
    def message_count(self) -> int:
        return self._get('message_count') or 0

    @property
    def incoming_message_count(self) -> int:
        return self._get('incoming_message_count') or 0

    @property
    def outgoing_message_count(self) -> int:
        return self._get('outgoing_message_count') or 0

    @property
    def last_message_id(self) -> Union[None, str]:
        return self._get('last_message_id')

    @property
    def group_ids(self) -> List[str]:
        return self._get('group_ids') or []
