from typing import Union

from telerivetapi.mixins import Deletable, ProjectObject


class MobileMoneyReceipt(Deletable, ProjectObject):
    collection = 'receipts'

    @property
    def tx_id(self) -> Union[None, str]:
        return self._get('tx_id')

    @property
    def tx_type(self) -> Union[None, str]:
        return self._get('tx_type')

    @property
    def currency(self) -> Union[None, str]:
        return self._get('currency')

    @property
    def amount(self) -> Union[None, float]:
        return self._get('amount')

    @property
    def balance(self) -> Union[None, float]:
        return self._get('balance')

    @property
    def fee(self) -> Union[None, float]:
        return self._get('fee')

    @property
    def name(self) -> Union[None, str]:
        return self._get('name')

    @property
    def phone_number(self) -> Union[None, str]:
        return self._get('phone_number')

    @property
    def time_created(self) -> Union[None, int]:
        return self._get('time_created')

    @property
    def other_tx_id(self) -> Union[None, str]:
        return self._get('other_tx_id')

    @property
    def content(self) -> Union[None, str]:
        return self._get('content')

    @property
    def provider_id(self) -> Union[None, str]:
        return self._get('provider_id')

    @property
    def contact_id(self) -> Union[None, str]:
        return self._get('contact_id')

    @property
    def phone_id(self) -> Union[None, str]:
        return self._get('phone_id')

    @property
    def message_id(self) -> Union[None, str]:
        return self._get('message_id')
