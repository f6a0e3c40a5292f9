from .balance import BalanceReport, compute_balance
from .contact import ContactReport, analyze_contact
from .keywords import KeywordReport, analyze_keywords, score_technical_keywords
from .readability import ReadabilityReport, analyze_readability
from .sections import SectionReport, analyze_sections
from .structure import StructureReport, analyze_structure

__all__ = [
    "BalanceReport",
    "compute_balance",
    "ContactReport",
    "analyze_contact",
    "KeywordReport",
    "analyze_keywords",
    "score_technical_keywords",
    "ReadabilityReport",
    "analyze_readability",
    "SectionReport",
    "analyze_sections",
    "StructureReport",
    "analyze_structure",
]
