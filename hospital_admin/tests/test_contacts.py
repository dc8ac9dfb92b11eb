from hospital_admin.contacts import ContactNumberSet, parse_phone_list


def test_add_strips_non_digits_and_prefixes_country_code():
    contacts = ContactNumberSet()
    assert contacts.add("(987) 654-3210", "+91") is True
    assert list(contacts) == ["+91 9876543210"]


def test_add_without_digits_is_noop():
    contacts = ContactNumberSet()
    assert contacts.add("  -- ()", "+1") is False
    assert contacts.add("", "+1") is False
    assert len(contacts) == 0


def test_duplicates_are_ignored():
    contacts = ContactNumberSet()
    contacts.add("555 0100", "+1")
    assert contacts.add("555-0100", "+1") is False
    assert len(contacts) == 1


def test_same_digits_under_other_country_code_is_distinct():
    contacts = ContactNumberSet()
    contacts.add("5550100", "+1")
    contacts.add("5550100", "+44")
    assert list(contacts) == ["+1 5550100", "+44 5550100"]


def test_remove_and_join():
    contacts = ContactNumberSet()
    contacts.add("111", "+91")
    contacts.add("222", "+1")
    contacts.add("333", "+44")

    assert contacts.remove("+1 222") is True
    assert contacts.remove("+1 222") is False
    assert "+1 222" not in contacts
    assert contacts.joined() == "+91 111,+44 333"


def test_parse_phone_list_trims_and_drops_empty_segments():
    assert parse_phone_list("+91 999, , +1 555") == ["+91 999", "+1 555"]
    assert parse_phone_list(None) == []
    assert parse_phone_list("") == []
