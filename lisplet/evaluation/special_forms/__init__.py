"""Registry of special forms for the lisplet evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary function application, so a
user function can never shadow one of these names.
"""

from lisplet.types.symbol import Symbol
from lisplet.evaluation.special_forms.if_form import if_form
from lisplet.evaluation.special_forms.defun_form import defun_form
from lisplet.evaluation.special_forms.format_form import format_form

SPECIAL_FORMS = {
    Symbol("if"): if_form,
    Symbol("defun"): defun_form,
    Symbol("format"): format_form,
}
