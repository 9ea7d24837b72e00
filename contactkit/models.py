"""
Data models and constants for LinkedIn contact capture.
"""
from dataclasses import dataclass
from typing import Optional

# LinkedIn profile domains
LINKEDIN_DOMAINS = ("linkedin.com/in", "linkedin.com/pub")

# Hosts that redirect to a profile URL
SHORT_LINK_DOMAINS = ("lnkd.in",)

# Returned when nothing in a slug looks like a name
FALLBACK_NAME = "LinkedIn Contact"

MAX_NAME_WORDS = 4
MAX_NAME_LENGTH = 50
LONG_NAME_WORDS = 3

# Unbroken tokens longer than this are tried as concatenated names
COMPOUND_TOKEN_MIN_LENGTH = 12
# Midpoint split only applies in (MIN, MAX]
MIDPOINT_SPLIT_MIN_LENGTH = 8
MIDPOINT_SPLIT_MAX_LENGTH = 12
MIN_NAME_PART_LENGTH = 3

# Professional suffixes stripped from the end of a slug
PROFESSIONAL_SUFFIXES = ("jr", "sr", "ii", "iii", "iv", "phd", "md", "cpa", "mba")

# Filler words dropped from slugs
STOPWORDS = set("""
the and of at in on for with by
""".split())

# Known first-name substrings used to split compound tokens.
# Matching walks this tuple in order and stops at the first hit, so longer
# names precede the names they contain.
FIRST_NAME_PARTS = (
    "christopher", "alessandra", "alessandro", "alejandra", "alejandro",
    "alexandra", "alexander", "elizabeth", "francesca", "francesco",
    "guadalupe", "katherine", "catherine", "stephanie", "valentina",
    "cristina", "christina", "christine",
    "stefanie", "jonathan", "jennifer", "fernando", "gabriela", "giovanni",
    "giuseppe", "isabella", "patricia", "margaret", "samantha", "benjamin",
    "kimberly", "michelle", "danielle", "victoria", "federico", "leonardo",
    "santiago", "veronica",
    "mariana", "michael", "matthew", "nicholas", "jessica", "rebecca",
    "richard", "natalie", "eduardo", "antonio", "roberto", "ricardo",
    "stephen", "william", "charles", "lorenzo", "gabriel", "raffaele",
    "camila", "carlos", "daniel", "andrew", "anthony", "joseph", "thomas",
    "sophia", "olivia", "javier", "miguel", "steven", "robert", "george",
    "giulia", "chiara", "matteo", "sergio", "manuel", "andrea", "ashley",
    "amanda", "nicole", "joshua", "rachel",
    "marco", "lucia", "laura", "maria", "sarah", "emily", "james", "david",
    "kevin", "brian", "jason", "paolo", "pablo", "diego", "jorge", "sofia",
    "elena", "chris", "scott", "susan", "karen", "lisa", "megan",
    "anna", "john", "mary", "mark", "paul", "juan", "jose", "luis", "emma",
    "mike", "alex", "ryan", "adam", "sara", "rosa", "luca", "gino",
)

# Known last-name substrings, tried after every first name missed.
LAST_NAME_PARTS = (
    "rodriguez", "hernandez", "fernandez", "gonzalez", "martinez",
    "williams", "anderson", "thompson", "robinson", "mitchell", "phillips",
    "esposito", "ramirez", "gutierrez", "morales", "castillo", "jimenez",
    "marino", "greco",
    "marrone", "johnson", "sanchez", "ferrari", "bianchi", "collins",
    "edwards", "stewart", "roberts", "campbell", "peterson", "costa",
    "fontana", "moretti", "barbieri", "lombardi", "galli", "caruso",
    "romano", "colombo", "garcia", "torres", "flores", "rivera", "miller",
    "wilson", "taylor", "walker", "wright", "nelson", "carter", "turner",
    "parker", "morris", "murphy", "rogers", "morgan", "cooper", "bailey",
    "howard", "vargas", "castro", "ortega", "rinaldi",
    "ricci", "bruno", "gallo", "conti", "russo", "rossi", "lopez", "perez",
    "gomez", "smith", "jones", "brown", "davis", "moore", "clark", "lewis",
    "young", "allen", "green", "baker", "adams", "evans", "kelly", "reyes",
    "cruz", "silva",
)


@dataclass
class ContactData:
    """A captured contact, as shown in the contact form and history."""
    name: str
    title: str = ""
    company: str = ""
    email: str = ""
    linkedin_url: str = ""
    conversation_context: str = ""
    id: Optional[str] = None
    timestamp: Optional[str] = None


@dataclass
class GeneratedMessage:
    """Follow-up message text plus the ISO timestamp it was written at."""
    message: str
    timestamp: str
