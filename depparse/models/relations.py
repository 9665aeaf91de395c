"""
Heuristic Universal Dependencies relation labels for unlabeled arcs

Labels are derived from the head/dependent categories and the arc direction.
"""

from typing import Dict

from depparse.data.structures import PosCategory

RELATION_DESCRIPTIONS: Dict[str, str] = {
    'root': 'Root of the sentence, attached to the synthetic ROOT token.',
    'nsubj': 'Nominal subject: a noun phrase that is the syntactic subject of a clause.',
    'obj': 'Direct object: the noun phrase that denotes the entity acted upon.',
    'obl': 'Oblique nominal: a non-core nominal argument or adjunct of a predicate.',
    'advmod': 'Adverbial modifier of a predicate or modifier word.',
    'amod': 'Adjectival modifier of a noun.',
    'det': 'Determiner expressing definiteness or quantity of a noun phrase.',
    'case': 'Case marking, typically a preposition attached to its nominal.',
    'nmod': 'Nominal modifier of another noun.',
    'xcomp': 'Open clausal complement of a predicate.',
    'dep': 'Unspecified dependency.',
}

_NOMINAL = {PosCategory.NOUN.value}


def label_arc(head_pos: str, dep_pos: str, head_index: int, dep_index: int) -> str:
    """Assign a relation label to the arc head_index -> dep_index."""
    if head_index == 0:
        return 'root'

    if dep_pos == PosCategory.DETERMINER.value:
        return 'det'
    if dep_pos == PosCategory.ADJECTIVE.value and head_pos in _NOMINAL:
        return 'amod'
    if dep_pos == PosCategory.ADVERB.value:
        return 'advmod'
    if dep_pos == PosCategory.PREPOSITION.value:
        return 'case'

    if dep_pos in _NOMINAL:
        if head_pos == PosCategory.VERB.value:
            return 'nsubj' if dep_index < head_index else 'obj'
        if head_pos in _NOMINAL:
            return 'nmod'
        if head_pos == PosCategory.PREPOSITION.value:
            return 'obl'

    if dep_pos == PosCategory.VERB.value and head_pos == PosCategory.VERB.value:
        return 'xcomp'

    return 'dep'


def describe_relation(label: str) -> str:
    return RELATION_DESCRIPTIONS.get(label, 'Unknown dependency relation.')
