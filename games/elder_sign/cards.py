"""Card and role descriptions (consumed by views and the console renderer).

Every ``Card`` and ``Role`` member must have an entry here; the test suite
checks the tables against the enums so a new card cannot ship undescribed.
"""

from typing import Dict

from games.elder_sign.models import Card, Role


CARD_DESCRIPTIONS: Dict[Card, str] = {
    Card.FUTILE_INVESTIGATION: (
        "Futile Investigation. Nothing here but rocks; the flashlight moves on."
    ),
    Card.ELDER_SIGN: (
        "Elder Sign. Reveal as many of these as there are players and the "
        "Investigators win."
    ),
    Card.CTHULHU: (
        "Cthulhu. Once every Cthulhu in the deck has been revealed the "
        "Cultists win immediately."
    ),
    Card.INSANITYS_GRASP: (
        "Insanity's Grasp. The investigated player may not speak; no effect "
        "on the table."
    ),
    Card.EVIL_PRESENCE: (
        "Evil Presence. The rest of the investigated player's hand is "
        "discarded unseen until the next round."
    ),
    Card.MIRAGE: (
        "Mirage. The most recently revealed Elder Sign was an illusion and is "
        "replaced by this card. Revealed in the last round, the Cultists win."
    ),
    Card.PARANOIA: (
        "Paranoia. The investigated player keeps the flashlight for the rest "
        "of the round."
    ),
    Card.PRIVATE_EYE: (
        "Private Eye. The investigator learns the investigated player's role."
    ),
}

ROLE_DESCRIPTIONS: Dict[Role, str] = {
    Role.NOT_SET: "Roles are dealt when the game starts.",
    Role.INVESTIGATOR: (
        "Find the Elder Signs before the fourth round ends, and keep Cthulhu "
        "buried."
    ),
    Role.CULTIST: (
        "Bring every Cthulhu to light, or stall the Investigators until the "
        "fourth round ends."
    ),
}


def describe_card(card: Card) -> str:
    """Return the tooltip text for *card*."""
    try:
        return CARD_DESCRIPTIONS[card]
    except KeyError:
        raise ValueError(f"Invalid card type: {card}") from None


def describe_role(role: Role) -> str:
    """Return the description for *role*."""
    try:
        return ROLE_DESCRIPTIONS[role]
    except KeyError:
        raise ValueError(f"Invalid role: {role}") from None
