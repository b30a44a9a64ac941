from typing import List, Union

from telerivetapi.mixins import Deletable, ProjectObject


# Only custom variables can be changed after scheduling.
class ScheduledMessage(Deletable, ProjectObject):
    collection = 'scheduled'

    @property
    def content(self) -> Union[None, str]:
        return self._get('content')

    @property
    def rrule(self) -> Union[None, str]:
        return self._get('rrule')

    @property
    def timezone_id(self) -> Union[None, str]:
        return self._get('timezone_id')

    @property
    def group_id(self) -> Union[None, str]:
        return self._get('group_id')

    @property
    def contact_id(self) -> Union[None, str]:
        return self._get('contact_id')

    @property
    def to_number(self) -> Union[None, str]:
        return self._get('to_number')

    @property
    def route_id(self) -> Union[None, str]:
        return self._get('route_id')

    @property
    def message_type(self) -> Union[None, str]:
        return self._get('message_type')

    @property
    def time_created(self) -> Union[None, int]:
        return self._get('time_created')

    @property
    def start_time(self) -> Union[None, int]:
        return self._get('start_time')

    @property
    def end_time(self) -> Union[None, int]:
        return self._get('end_time')

    @property
    def prev_time(self) -> Union[None, int]:
        return self._get('prev_time')

    @property
    def next_time(self) -> Union[None, int]:
        return self._get('next_time')

    @property
    def occurrences(self) -> int:
        return self._get('occurrences') or 0

    @property
    def is_template(self) -> bool:
        return bool(self._get('is_template'))

    @property
    def label_ids(self) -> List[str]:
        return self._get('label_ids') or []
