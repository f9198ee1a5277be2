"""Email report subscription page."""

import streamlit as st

from frontend.components import EmailSignup
from frontend.components.email_signup import SUBSCRIBE, UNSUBSCRIBE
from frontend.runtime import get_controller, request_input_reset, run_async
from frontend.state.subscription import SubscriptionController


class SubscribePage:
    CONTROLLER_KEY = "subscription_controller"
    FORM_KEY = "subscribe"

    def __init__(self):
        self.email_signup = EmailSignup()

    def render(self):
        controller: SubscriptionController = get_controller(self.CONTROLLER_KEY, SubscriptionController)

        action, email = self.email_signup.render(
            loading=controller.loading,
            message=controller.message,
            error=controller.error,
            key=self.FORM_KEY,
        )

        if action == SUBSCRIBE:
            succeeded = run_async(controller.subscribe(email))
        elif action == UNSUBSCRIBE:
            succeeded = run_async(controller.unsubscribe(email))
        else:
            return

        if succeeded:
            request_input_reset(f"{self.FORM_KEY}_email")
        st.rerun()
