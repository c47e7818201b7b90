"""Tests for contact records and dashboard copy."""

import datetime as dt

import pytest

TODAY = dt.date(2025, 6, 1)


def _contact(**kwargs):
    from kinship.contacts import Contact
    record = {'id': 1, 'name': 'Ana'}
    record.update(kwargs)
    return Contact.from_record(record)


class TestFromRecord:

    def test_camel_case_aliases(self):
        c = _contact(lastContactDate='2025-05-20T09:30:00Z', lastContactMethod='phone',
                     urgencyLevel='4', relationshipType='family')
        assert c.last_contact_date == dt.date(2025, 5, 20)
        assert c.last_contact_method == 'phone'
        assert c.urgency_level == 4
        assert c.relationship_type == 'family'

    def test_defaults(self):
        c = _contact()
        assert c.urgency_level == 1
        assert c.frequency == 'monthly'
        assert c.categories == []
        assert c.last_contact_date is None

    def test_unknown_keys_ignored(self):
        c = _contact(avatarUrl='x.png')
        assert c.name == 'Ana'

    def test_missing_name(self):
        from kinship.contacts import Contact
        with pytest.raises(ValueError):
            Contact.from_record({'id': 3})

    def test_date_object_kept(self):
        c = _contact(last_contact_date=dt.date(2025, 1, 2))
        assert c.last_contact_date == dt.date(2025, 1, 2)


class TestLoadContacts:

    def test_list_file(self, tmp_path):
        from kinship.contacts import load_contacts
        path = tmp_path / 'contacts.yaml'
        path.write_text("- {id: 1, name: Ana}\n- {id: 2, name: Ben, categories: [work]}\n")
        contacts = load_contacts(path)
        assert [c.name for c in contacts] == ['Ana', 'Ben']
        assert contacts[1].categories == ['work']

    def test_mapping_with_contacts_key(self, tmp_path):
        from kinship.contacts import load_contacts
        path = tmp_path / 'contacts.json'
        path.write_text('{"contacts": [{"id": "9", "name": "Cy"}]}')
        assert load_contacts(path)[0].id == '9'

    def test_bad_shape(self, tmp_path):
        from kinship.contacts import load_contacts
        path = tmp_path / 'bad.yaml'
        path.write_text("name: nobody\n")
        with pytest.raises(ValueError):
            load_contacts(path)


class TestDescribeContact:

    def test_no_contact(self):
        from kinship.contacts import describe_contact, NO_CONTACT_CONTEXT, DEFAULT_CTA
        assert describe_contact(_contact(), TODAY) == (NO_CONTACT_CONTEXT, DEFAULT_CTA)

    def test_context_with_method(self):
        from kinship.contacts import describe_contact
        c = _contact(last_contact_date='2025-05-20', last_contact_method='email')
        context, _ = describe_contact(c, TODAY)
        assert context == 'Last contact: 12 days ago via email'

    def test_context_without_method(self):
        from kinship.contacts import describe_contact
        c = _contact(last_contact_date='2025-05-20')
        assert describe_contact(c, TODAY)[0] == 'Last contact: 12 days ago'

    @pytest.mark.parametrize('frequency,days,expected', [
        ('daily', 2, 'Contact today!'),
        ('daily', 1, 'Reach out'),
        ('weekly', 8, 'Contact this week'),
        ('weekly', 7, 'Reach out'),
        ('monthly', 31, 'Contact this month'),
        ('monthly', 30, 'Reach out'),
        ('quarterly', 400, 'Reach out'),
    ])
    def test_cta(self, frequency, days, expected):
        from kinship.contacts import describe_contact
        c = _contact(frequency=frequency, last_contact_date=TODAY - dt.timedelta(days=days))
        assert describe_contact(c, TODAY)[1] == expected

    def test_days_since(self):
        from kinship.contacts import days_since_contact
        assert days_since_contact(_contact(), TODAY) is None
        assert days_since_contact(_contact(last_contact_date='2025-05-31'), TODAY) == 1


class TestToEntity:

    def test_fields(self):
        from kinship.contacts import to_entity
        e = to_entity(_contact(urgencyLevel=3, categories=['family', 'work']))
        assert e.id == 1
        assert e.label == 'Ana'
        assert e.weight == 3.0
        assert e.regions == frozenset({'family', 'work'})
        assert e.position is None
