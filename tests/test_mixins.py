"""Unit tests for entity field access, dirty tracking and persistence."""

from unittest.mock import MagicMock

import pytest

from telerivetapi.contacts import Contact
from telerivetapi.errors import InvalidParameterError
from telerivetapi.groups import Group
from telerivetapi.messages import Message
from telerivetapi.mixins import CustomVars
from telerivetapi.phones import Phone
from telerivetapi.receipts import MobileMoneyReceipt
from telerivetapi.scheduled_messages import ScheduledMessage


def test_handle_fetches_on_first_unknown_field(api: MagicMock) -> None:
    """A handle loads itself once, the first time a field it lacks is read."""
    contact = Contact(api, {"project_id": "PJ1", "id": "CT1"}, False)
    api.do_request.return_value = {
        "id": "CT1",
        "project_id": "PJ1",
        "name": "Jane",
        "phone_number": "+15551234567",
        "vars": {"email": "jane@example.com"},
    }

    assert contact.id == "CT1"
    assert contact.project_id == "PJ1"
    api.do_request.assert_not_called()

    assert contact.name == "Jane"
    assert contact.phone_number == "+15551234567"
    assert contact.vars["email"] == "jane@example.com"
    assert contact.is_loaded is True
    api.do_request.assert_called_once_with("GET", "/projects/PJ1/contacts/CT1")


def test_loaded_entity_returns_none_for_missing_field(api: MagicMock) -> None:
    contact = Contact(api, {"project_id": "PJ1", "id": "CT1", "name": "Jane"})

    assert contact.phone_number is None
    assert contact.group_ids == []
    assert contact.message_count == 0
    api.do_request.assert_not_called()


def test_setter_marks_dirty_without_request(api: MagicMock) -> None:
    group = Group(api, {"project_id": "PJ1", "id": "CG1", "name": "Old"})

    group.name = "New"

    assert group.name == "New"
    assert group.is_dirty()
    api.do_request.assert_not_called()


def test_save_posts_dirty_fields_to_entity_path(api: MagicMock) -> None:
    contact = Contact(api, {"project_id": "PJ1", "id": "CT1", "name": "Jane", "vars": {"a": 1, "b": 2}})
    contact.name = "Janet"
    contact.send_blocked = True
    contact.vars["a"] = 10
    del contact.vars["b"]

    contact.save()

    api.do_request.assert_called_once_with(
        "POST",
        "/projects/PJ1/contacts/CT1",
        {"name": "Janet", "send_blocked": True, "vars": {"a": 10, "b": None}},
    )
    assert not contact.is_dirty()


def test_failed_save_keeps_dirty_fields(api: MagicMock) -> None:
    contact = Contact(api, {"project_id": "PJ1", "id": "CT1"})
    contact.phone_number = "not a number"
    api.do_request.side_effect = InvalidParameterError("Invalid phone number", code="invalid_param")

    with pytest.raises(InvalidParameterError):
        contact.save()

    assert contact.is_dirty()


def test_handle_can_be_saved_without_loading(api: MagicMock) -> None:
    message = Message(api, {"project_id": "PJ1", "id": "SM1"}, False)

    message.starred = True
    message.save()

    api.do_request.assert_called_once_with("POST", "/projects/PJ1/messages/SM1", {"starred": True})


def test_load_keeps_local_changes(api: MagicMock) -> None:
    contact = Contact(api, {"project_id": "PJ1", "id": "CT1"}, False)
    contact.name = "Local"
    contact.vars["tag"] = "local"
    api.do_request.return_value = {"id": "CT1", "name": "Remote", "vars": {"tag": "remote", "x": 1}}

    contact.load()

    assert contact.name == "Local"
    assert contact.vars.to_dict() == {"tag": "local", "x": 1}


def test_delete(api: MagicMock) -> None:
    scheduled = ScheduledMessage(api, {"project_id": "PJ1", "id": "SC1"}, False)

    scheduled.delete()

    api.do_request.assert_called_once_with("DELETE", "/projects/PJ1/scheduled/SC1")


@pytest.mark.parametrize(
    ("entity_type", "field"),
    [
        (Contact, "id"),
        (Contact, "project_id"),
        (Contact, "time_created"),
        (Message, "content"),
        (Phone, "phone_number"),
        (ScheduledMessage, "content"),
        (MobileMoneyReceipt, "amount"),
    ],
)
def test_read_only_fields(api: MagicMock, entity_type: type, field: str) -> None:
    entity = entity_type(api, {"project_id": "PJ1", "id": "XY1"}, False)

    with pytest.raises(AttributeError):
        setattr(entity, field, "changed")

    api.do_request.assert_not_called()


def test_custom_vars_dirty_tracking() -> None:
    custom_vars = CustomVars({"a": 1})

    custom_vars["b"] = 2
    del custom_vars["a"]

    assert dict(custom_vars) == {"b": 2}
    assert custom_vars.get_dirty_variables() == {"b": 2, "a": None}
    custom_vars.clear_dirty_variables()
    assert custom_vars.get_dirty_variables() == {}


def test_to_dict_and_repr(api: MagicMock) -> None:
    group = Group(api, {"project_id": "PJ1", "id": "CG1", "name": "VIPs", "vars": {"k": "v"}})

    assert group.to_dict() == {"project_id": "PJ1", "id": "CG1", "name": "VIPs", "vars": {"k": "v"}}
    assert repr(group).startswith("Group(")
