from __future__ import annotations

from typing import Optional

from schemas.form import FieldView, WizardView
from services.form_state import FormState
from services.step_plan import get_step, visible_fields
from utils.case import dict_keys_to_camel, to_camel_key


def render_step(state: FormState, session_id: Optional[str] = None) -> WizardView:
    """Build the client view of the current page. Field names are camelCase, as on the wire."""
    step = get_step(state.step, state.plan)
    fields = [
        FieldView(
            name=to_camel_key(f.name),
            kind=f.kind,
            label=f.label,
            required=f.required,
            options=f.options,
            placeholder=f.placeholder,
            value=state.values.get(f.name),
            error=state.errors.get(f.name),
            touched=f.name in state.touched,
        )
        for f in visible_fields(state.step, state.values, state.plan)
    ]
    return WizardView(
        session_id=session_id,
        step=state.step,
        step_key=step.key,
        total_steps=state.total_steps,
        title=step.title,
        progress=round(state.step / state.total_steps * 100),
        fields=fields,
        values=dict_keys_to_camel(state.values),
        errors=dict_keys_to_camel(state.errors),
        status=state.status,
        error_message=state.error_message,
        can_submit=state.can_submit,
    )
