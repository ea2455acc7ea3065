"""Handlers for the keyword forms of the ceceio evaluator.

Each handler receives the parsed form, the environment and the evaluator,
and decides itself which sub-expressions get evaluated.
"""

from ceceio.evaluation.special_forms.if_form import if_form
from ceceio.evaluation.special_forms.define_form import define_form
from ceceio.evaluation.special_forms.cond_form import cond_form

__all__ = ["if_form", "define_form", "cond_form"]
