from typing import TYPE_CHECKING, Any, Dict, Union

from telerivetapi.contacts import Contact
from telerivetapi.data_tables import DataTable
from telerivetapi.groups import Group
from telerivetapi.labels import Label
from telerivetapi.messages import Message
from telerivetapi.mixins import ApiObject
from telerivetapi.phones import Phone
from telerivetapi.receipts import MobileMoneyReceipt
from telerivetapi.routes import Route
from telerivetapi.scheduled_messages import ScheduledMessage
from telerivetapi.services import Service

if TYPE_CHECKING:
    from telerivetapi.cursor import APICursor

Options = Dict[str, Any]


# noinspection PyProtectedMember
class Project(ApiObject):
    """A Telerivet project.

    Every method maps to a single request under /projects/{id}; the
    init_*_by_id methods build an unloaded handle without any request.
    """

    def get_base_api_path(self) -> str:
        return f'/projects/{self.id}'

    @property
    def name(self) -> Union[None, str]:
        return self._get('name')

    @name.setter
    def name(self, value: str) -> None:
        self._set('name', value)

    @property
    def timezone_id(self) -> Union[None, str]:
        return self._get('timezone_id')

    def _post(self, entity_type: type, path: str, options: Options) -> Any:
        return entity_type(self._api, self._api.do_request('POST', self.get_base_api_path() + path, options))

    def _get_by_id(self, entity_type: type, path: str, id: str) -> Any:
        return entity_type(self._api, self._api.do_request('GET', f'{self.get_base_api_path()}{path}/{id}'))

    def _init_by_id(self, entity_type: type, id: str) -> Any:
        return entity_type(self._api, {'project_id': self.id, 'id': id}, False)

    def _query(self, entity_type: type, path: str, options: Union[None, Options]) -> 'APICursor':
        return self._api.cursor(entity_type, self.get_base_api_path() + path, options)

    # Messages

    def send_message(self, options: Options) -> Message:
        return self._post(Message, '/messages/send', options)

    def send_messages(self, options: Options) -> Dict[str, Any]:
        """Send one message to a group or to a list of numbers.

        The batch result is returned as the raw response dict. The 500
        number limit on to_numbers is enforced by the server.
        """
        return self._api.do_request('POST', self.get_base_api_path() + '/messages/send_batch', options)

    def schedule_message(self, options: Options) -> ScheduledMessage:
        return self._post(ScheduledMessage, '/scheduled', options)

    def query_messages(self, options: Options = None) -> 'APICursor[Message]':
        return self._query(Message, '/messages', options)

    def get_message_by_id(self, id: str) -> Message:
        return self._get_by_id(Message, '/messages', id)

    def init_message_by_id(self, id: str) -> Message:
        return self._init_by_id(Message, id)

    # Contacts

    def get_or_create_contact(self, options: Options) -> Contact:
        """Look up a contact by phone_number (or name), creating it if missing.

        Matching and the update of name, phone_number and vars happen on the
        server; the single returned contact is wrapped as is.
        """
        return self._post(Contact, '/contacts', options)

    def query_contacts(self, options: Options = None) -> 'APICursor[Contact]':
        return self._query(Contact, '/contacts', options)

    def get_contact_by_id(self, id: str) -> Contact:
        return self._get_by_id(Contact, '/contacts', id)

    def init_contact_by_id(self, id: str) -> Contact:
        return self._init_by_id(Contact, id)

    # Phones

    def query_phones(self, options: Options = None) -> 'APICursor[Phone]':
        return self._query(Phone, '/phones', options)

    def get_phone_by_id(self, id: str) -> Phone:
        return self._get_by_id(Phone, '/phones', id)

    def init_phone_by_id(self, id: str) -> Phone:
        return self._init_by_id(Phone, id)

    # Groups

    def query_groups(self, options: Options = None) -> 'APICursor[Group]':
        return self._query(Group, '/groups', options)

    def get_or_create_group(self, name: str) -> Group:
        return self._post(Group, '/groups', {'name': name})

    def get_group_by_id(self, id: str) -> Group:
        return self._get_by_id(Group, '/groups', id)

    def init_group_by_id(self, id: str) -> Group:
        return self._init_by_id(Group, id)

    # Labels

    def query_labels(self, options: Options = None) -> 'APICursor[Label]':
        return self._query(Label, '/labels', options)

    def get_or_create_label(self, name: str) -> Label:
        return self._post(Label, '/labels', {'name': name})

    def get_label_by_id(self, id: str) -> Label:
        return self._get_by_id(Label, '/labels', id)

    def init_label_by_id(self, id: str) -> Label:
        return self._init_by_id(Label, id)

    # Data tables

    def query_data_tables(self, options: Options = None) -> 'APICursor[DataTable]':
        return self._query(DataTable, '/tables', options)

    def get_or_create_data_table(self, name: str) -> DataTable:
        return self._post(DataTable, '/tables', {'name': name})

    def get_data_table_by_id(self, id: str) -> DataTable:
        return self._get_by_id(DataTable, '/tables', id)

    def init_data_table_by_id(self, id: str) -> DataTable:
        return self._init_by_id(DataTable, id)

    # Scheduled messages

    def query_scheduled_messages(self, options: Options = None) -> 'APICursor[ScheduledMessage]':
        return self._query(ScheduledMessage, '/scheduled', options)

    def get_scheduled_message_by_id(self, id: str) -> ScheduledMessage:
        return self._get_by_id(ScheduledMessage, '/scheduled', id)

    def init_scheduled_message_by_id(self, id: str) -> ScheduledMessage:
        return self._init_by_id(ScheduledMessage, id)

    # Services

    def query_services(self, options: Options = None) -> 'APICursor[Service]':
        return self._query(Service, '/services', options)

    def get_service_by_id(self, id: str) -> Service:
        return self._get_by_id(Service, '/services', id)

    def init_service_by_id(self, id: str) -> Service:
        return self._init_by_id(Service, id)

    # Mobile money receipts

    def query_receipts(self, options: Options = None) -> 'APICursor[MobileMoneyReceipt]':
        return self._query(MobileMoneyReceipt, '/receipts', options)

    def get_receipt_by_id(self, id: str) -> MobileMoneyReceipt:
        return self._get_by_id(MobileMoneyReceipt, '/receipts', id)

    def init_receipt_by_id(self, id: str) -> MobileMoneyReceipt:
        return self._init_by_id(MobileMoneyReceipt, id)

    # Routes

    def query_routes(self, options: Options = None) -> 'APICursor[Route]':
        return self._query(Route, '/routes', options)

    def get_route_by_id(self, id: str) -> Route:
        return self._get_by_id(Route, '/routes', id)

    def init_route_by_id(self, id: str) -> Route:
        return self._init_by_id(Route, id)
