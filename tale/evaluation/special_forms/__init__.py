"""Registry of special forms for the TALE evaluator.

Maps Symbols to handlers implementing non-standard evaluation rules. The
evaluator consults this table before ordinary function application; only a
Symbol in head position can name a special form.
"""

from tale.types.symbol import Symbol
from tale.evaluation.special_forms.if_form import if_form
from tale.evaluation.special_forms.def_form import def_form
from tale.evaluation.special_forms.fn_form import fn_form

SPECIAL_FORMS = {
    Symbol("if"): if_form,
    Symbol("def"): def_form,
    Symbol("fn"): fn_form,
}
