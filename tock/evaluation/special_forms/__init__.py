"""Registry of special forms for the Tock evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before primitives and user functions. Every
handler has the signature (tail, env, ctx, evaluate_fn) and is a generator
returning the form's value.
"""

from tock.types.symbol import Symbol
from tock.evaluation.special_forms.define_form import define_form
from tock.evaluation.special_forms.set_form import set_form
from tock.evaluation.special_forms.func_form import func_form
from tock.evaluation.special_forms.if_form import if_form
from tock.evaluation.special_forms.while_form import while_form
from tock.evaluation.special_forms.logic_forms import and_form, or_form
from tock.evaluation.special_forms.switch_form import switch_form
from tock.evaluation.special_forms.return_form import return_form
from tock.evaluation.special_forms.quote_form import quote_form
from tock.evaluation.special_forms.begin_form import begin_form
from tock.evaluation.special_forms.output_forms import cout_form, fill_rect_form

SPECIAL_FORMS = {
    Symbol("def"): define_form,
    Symbol("set"): set_form,
    Symbol("func"): func_form,
    Symbol("if"): if_form,
    Symbol("while"): while_form,
    Symbol("and"): and_form,
    Symbol("or"): or_form,
    Symbol("switch"): switch_form,
    Symbol("return"): return_form,
    Symbol("quote"): quote_form,
    Symbol("begin"): begin_form,
    Symbol("cout"): cout_form,
    Symbol("fillRect"): fill_rect_form,
}
