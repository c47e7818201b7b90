"""
Contact records as the layout engine sees them.

The CRUD API owns the contacts table; this module only reads exported
records (YAML or JSON, camelCase or snake_case keys), derives the
dashboard copy for each contact, and turns records into entities.

    contacts = load_contacts('contacts.yaml')
    context, cta = describe_contact(contacts[0], today=date(2025, 6, 1))
    entity = to_entity(contacts[0])
"""

import datetime as dt
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml

from forces import Entity

RELATIONSHIP_TYPES = ('family', 'friend', 'work', 'acquaintance', 'romantic', 'other')
CONTACT_METHODS = ('phone', 'email', 'text', 'in-person', 'video-call', 'social-media')
FREQUENCIES = ('daily', 'weekly', 'monthly', 'quarterly', 'yearly', 'rarely')

# frequency -> (days without contact before nudging, call to action)
OVERDUE_RULES = {
    'daily': (1, 'Contact today!'),
    'weekly': (7, 'Contact this week'),
    'monthly': (30, 'Contact this month'),
}
DEFAULT_CTA = 'Reach out'
NO_CONTACT_CONTEXT = 'No previous contact recorded'

# camelCase API field -> dataclass field
_FIELD_ALIASES = {
    'lastContactDate': 'last_contact_date',
    'lastContactMethod': 'last_contact_method',
    'relationshipType': 'relationship_type',
    'urgencyLevel': 'urgency_level',
    'createdAt': 'created_at',
    'updatedAt': 'updated_at',
}


@dataclass
class Contact:
    id: Union[int, str]
    name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    last_contact_date: Optional[dt.date] = None
    last_contact_method: Optional[str] = None
    relationship_type: str = 'other'
    notes: Optional[str] = None
    urgency_level: int = 1
    frequency: str = 'monthly'
    categories: List[str] = field(default_factory=list)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> 'Contact':
        """Build from an API/export record; unknown keys are ignored."""
        known = set(cls.__dataclass_fields__)
        kwargs = {}
        for key, value in record.items():
            name = _FIELD_ALIASES.get(key, key)
            if name in known:
                kwargs[name] = value
        if 'id' not in kwargs or 'name' not in kwargs:
            raise ValueError(f"Contact record needs 'id' and 'name': {record!r}")

        kwargs['last_contact_date'] = _parse_date(kwargs.get('last_contact_date'))
        if kwargs.get('urgency_level') is not None:
            kwargs['urgency_level'] = int(kwargs['urgency_level'])
        else:
            kwargs.pop('urgency_level', None)
        kwargs['categories'] = list(kwargs.get('categories') or [])
        return cls(**kwargs)


def load_contacts(path: Union[str, Path]) -> List[Contact]:
    """
    Read contacts from a YAML or JSON file.

    Accepts a top-level list of records or a mapping with a 'contacts'
    list.
    """
    path = Path(path).expanduser()
    with open(path) as f:
        data = yaml.safe_load(f)

    if isinstance(data, dict):
        data = data.get('contacts')
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of contacts")

    return [Contact.from_record(r) for r in data]


def days_since_contact(contact: Contact, today: Optional[dt.date] = None) -> Optional[int]:
    if contact.last_contact_date is None:
        return None
    today = today or dt.date.today()
    return (today - contact.last_contact_date).days


def describe_contact(contact: Contact, today: Optional[dt.date] = None) -> Tuple[str, str]:
    """
    Dashboard copy: (context line, call to action).

    "Last contact: 12 days ago via phone" / "Contact this week"
    """
    days = days_since_contact(contact, today)

    if days is None:
        context = NO_CONTACT_CONTEXT
    else:
        context = f"Last contact: {days} days ago"
        if contact.last_contact_method:
            context += f" via {contact.last_contact_method}"

    cta = DEFAULT_CTA
    rule = OVERDUE_RULES.get(contact.frequency)
    if rule is not None and days is not None and days > rule[0]:
        cta = rule[1]

    return context, cta


def to_entity(contact: Contact) -> Entity:
    """Entity keyed by contact id; urgency becomes the ball weight."""
    return Entity(
        id=contact.id,
        label=contact.name,
        regions=contact.categories,
        weight=float(contact.urgency_level),
    )


def _parse_date(value: Any) -> Optional[dt.date]:
    if value is None or value == '':
        return None
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    return dt.date.fromisoformat(str(value)[:10])
