"""
Requirement Extractor

Turns a decoded requirement document (plain UTF-8 text) into a
Requirements aggregate using heading detection and list/sentence patterns.

Extraction never fails on content: a missing heading, section or pattern
simply leaves the corresponding sequence empty.
"""
import re
import time
from typing import Dict, List, Optional, Sequence, Tuple

from core.domain.requirements import (
    FunctionalRequirement,
    NonFunctionalRequirement,
    RequirementItem,
    Requirements,
    UserStory,
    format_requirement_id,
)
from core.interfaces.item_extractor import IListItemExtractor
from core.services.list_item_extractor import (
    DEFAULT_MIN_ITEM_LENGTH,
    BulletItemExtractor,
    ChainedItemExtractor,
    CombinedItemExtractor,
    NumberedItemExtractor,
)
from core.services.logger import get_logger
from core.services.pattern_classifier import PatternClassifier
from core.services.section_locator import SectionLocator


DEFAULT_TITLE = "Untitled Project"
DESCRIPTION_FALLBACK_LENGTH = 200

# section key -> heading synonyms, tried in order
SECTION_HEADINGS: Dict[str, List[str]] = {
    'functional': ['功能需求', '功能要求', 'Functional Requirements', 'Features'],
    'non_functional': [
        '非功能需求', '性能需求', 'Non-Functional Requirements',
        'Non Functional Requirements', 'Performance'
    ],
    'acceptance': ['验收标准', '验收条件', 'Acceptance Criteria'],
    'business_rules': ['业务规则', '业务逻辑', 'Business Rules'],
    'constraints': ['约束条件', '限制条件', 'Constraints'],
    'assumptions': ['假设条件', '假设', 'Assumptions'],
}

# section key -> id prefix for plain {id, description} items
ITEM_PREFIXES: Dict[str, str] = {
    'acceptance': 'AC',
    'business_rules': 'BR',
    'constraints': 'CON',
    'assumptions': 'ASM',
}

TITLE_PATTERNS = [
    re.compile(r'^#[ \t]+(.+)$', re.MULTILINE),
    re.compile(r'^(.+)\n=+[ \t]*$', re.MULTILINE),
    re.compile(r'(?:项目名称|Project[ \t]+Name)[ \t]*[：:][ \t]*(.+)', re.IGNORECASE),
    re.compile(r'(?:系统名称|System[ \t]+Name)[ \t]*[：:][ \t]*(.+)', re.IGNORECASE),
    re.compile(r'(?:需求文档|Requirements[ \t]+Document)[ \t]*[：:][ \t]*(.+)', re.IGNORECASE),
]

_SENTENCE_END = r'(?=[。！？!?]|\.(?=\s|$)|\n|$)'

DESCRIPTION_PATTERNS = [
    re.compile(rf'(?:{label})[ \t]*[：:][ \t]*(.+?){_SENTENCE_END}', re.IGNORECASE)
    for label in (
        r'项目描述|Project[ \t]+Description',
        r'系统描述|System[ \t]+Description',
        r'概述|Overview',
        r'简介|Summary',
    )
]

# The English benefit ends at a sentence break; a period inside a token
# ("v1.2", "example.com") is kept. The English goal drops a leading "to"
# so it reads after "can" in generated titles.
USER_STORY_PATTERNS = [
    re.compile(
        r'作为[ \t]*([^，,\n]+?)[ \t]*[，,][ \t]*我希望[ \t]*([^，,\n]+?)[ \t]*[，,][ \t]*以便[ \t]*([^。！？\n]+)'
    ),
    re.compile(
        r'As[ \t]+an?[ \t]+([^,\n]+?)[ \t]*,[ \t]*I[ \t]+want[ \t]+(?:to[ \t]+)?([^,\n]+?)'
        r'[ \t]*,?[ \t]*so[ \t]+that[ \t]+((?:[^。！？.!?\n]|[.!?](?=[^\s。！？]))+)',
        re.IGNORECASE
    ),
]


class RequirementExtractor:
    """
    Extracts structured requirements from document text.

    Section location, list item matching and classification are injected
    so each heuristic can be replaced on its own.
    """

    def __init__(
        self,
        classifier: Optional[PatternClassifier] = None,
        section_locator: Optional[SectionLocator] = None,
        functional_items: Optional[IListItemExtractor] = None,
        section_items: Optional[IListItemExtractor] = None,
        min_item_length: int = DEFAULT_MIN_ITEM_LENGTH,
        section_headings: Optional[Dict[str, Sequence[str]]] = None
    ):
        """
        Initialize extractor.

        Args:
            classifier: Priority / NFR type classifier
            section_locator: Heading-based section finder
            functional_items: Item strategy for the functional section
                (numbered items first, then bullets by default)
            section_items: Item strategy for every other section
            min_item_length: Minimum item length for the default strategies
            section_headings: Replacement heading synonyms per section key
        """
        self.section_headings = dict(SECTION_HEADINGS)
        if section_headings:
            self.section_headings.update({k: list(v) for k, v in section_headings.items()})

        self.classifier = classifier or PatternClassifier()
        self.section_locator = section_locator or SectionLocator(
            known_headings=[h for names in self.section_headings.values() for h in names]
        )
        self.functional_items = functional_items or ChainedItemExtractor(
            NumberedItemExtractor(min_item_length),
            BulletItemExtractor(min_item_length),
        )
        self.section_items = section_items or CombinedItemExtractor(min_item_length)
        self._log = get_logger("extractor")

    def extract(self, text: str) -> Requirements:
        """Build a Requirements aggregate from document text.

        Args:
            text: Decoded document content

        Returns:
            Requirements; sequences are empty where nothing was recognised
        """
        start = time.perf_counter()
        content = (text or "").replace('\r\n', '\n').replace('\r', '\n')

        requirements = Requirements(
            title=self.extract_title(content),
            description=self.extract_description(content),
            functional_requirements=self.extract_functional_requirements(content),
            non_functional_requirements=self.extract_non_functional_requirements(content),
            user_stories=self.extract_user_stories(content),
            acceptance_criteria=self._extract_plain_items(content, 'acceptance'),
            business_rules=self._extract_plain_items(content, 'business_rules'),
            constraints=self._extract_plain_items(content, 'constraints'),
            assumptions=self._extract_plain_items(content, 'assumptions'),
        )

        self._log.log_extraction(
            title=requirements.title,
            counts=requirements.counts(),
            duration_ms=(time.perf_counter() - start) * 1000,
        )
        return requirements

    def extract_title(self, content: str) -> str:
        """First matching title pattern, else the default title."""
        for pattern in TITLE_PATTERNS:
            match = pattern.search(content)
            if match and match.group(1).strip():
                return match.group(1).strip()
        return DEFAULT_TITLE

    def extract_description(self, content: str) -> str:
        """Labelled description up to sentence end, else the document head."""
        for pattern in DESCRIPTION_PATTERNS:
            match = pattern.search(content)
            if match and match.group(1).strip():
                return match.group(1).strip()

        head = content[:DESCRIPTION_FALLBACK_LENGTH].replace('\n', ' ').strip()
        return head + '...'

    def extract_functional_requirements(self, content: str) -> Tuple[FunctionalRequirement, ...]:
        section = self._section(content, 'functional')
        return tuple(
            FunctionalRequirement(
                id=format_requirement_id('FR', number),
                description=item,
                priority=self.classifier.classify_priority(item),
            )
            for number, item in enumerate(self.functional_items.extract(section), start=1)
        )

    def extract_non_functional_requirements(self, content: str) -> Tuple[NonFunctionalRequirement, ...]:
        section = self._section(content, 'non_functional')
        return tuple(
            NonFunctionalRequirement(
                id=format_requirement_id('NFR', number),
                description=item,
                type=self.classifier.classify_nfr_type(item),
            )
            for number, item in enumerate(self.section_items.extract(section), start=1)
        )

    def extract_user_stories(self, content: str) -> Tuple[UserStory, ...]:
        """Scan the whole document, one pattern after the other."""
        matches: List[Tuple[str, str, str]] = []
        for pattern in USER_STORY_PATTERNS:
            for match in pattern.finditer(content):
                matches.append(tuple(group.strip() for group in match.groups()))

        return tuple(
            UserStory(id=format_requirement_id('US', number), role=role, goal=goal, benefit=benefit)
            for number, (role, goal, benefit) in enumerate(matches, start=1)
        )

    def _extract_plain_items(self, content: str, key: str) -> Tuple[RequirementItem, ...]:
        prefix = ITEM_PREFIXES[key]
        section = self._section(content, key)
        return tuple(
            RequirementItem(id=format_requirement_id(prefix, number), description=item)
            for number, item in enumerate(self.section_items.extract(section), start=1)
        )

    def _section(self, content: str, key: str) -> str:
        section = self.section_locator.locate(content, self.section_headings[key])
        if section is None:
            self._log.debug("section_not_found", section=key)
            return ""
        return section


def extract_requirements(text: str) -> Requirements:
    """Extract requirements with the default heuristics."""
    return RequirementExtractor().extract(text)

