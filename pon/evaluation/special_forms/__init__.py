"""Registry of special forms for the Pon evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
function application. Each handler receives the unevaluated operands, the
current environment and the evaluator to recurse with.
"""

from pon.types.symbol import Symbol
from pon.evaluation.special_forms.quote_forms import quote_form
from pon.evaluation.special_forms.define_form import define_form
from pon.evaluation.special_forms.set_form import set_form
from pon.evaluation.special_forms.env_form import env_form
from pon.evaluation.special_forms.if_form import if_form
from pon.evaluation.special_forms.lambda_form import lambda_form
from pon.evaluation.special_forms.begin_form import begin_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("define"): define_form,
    Symbol("set!"): set_form,
    Symbol("env"): env_form,
    Symbol("if"): if_form,
    Symbol("lambda"): lambda_form,
    Symbol("begin"): begin_form,
}
