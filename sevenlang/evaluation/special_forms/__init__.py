"""Special forms of SevenLang.

Each special form is an expression node with a `from_syntax` builder that
checks the shape of the form at lowering time and raises ParseError for a
malformed one. The keyword set is closed; see `sevenlang.reader.parser`.
"""

from sevenlang.evaluation.special_forms.define_form import Define
from sevenlang.evaluation.special_forms.if_form import If
from sevenlang.evaluation.special_forms.lambda_form import Lambda
from sevenlang.evaluation.special_forms.list_forms import ListForm, MapForm

__all__ = ["Define", "If", "Lambda", "ListForm", "MapForm"]
