"""
Login Page Object

Locators and actions for a username/password login form.
"""

from typing import Optional

from selenium.webdriver.common.by import By

from .base_page import BasePage


class LoginPage(BasePage):
    USERNAME_FIELD = (By.XPATH, "//input[@id='user-name']")
    PASSWORD_FIELD = (By.ID, "password")
    LOGIN_BUTTON = (By.ID, "login-button")
    ERROR_MESSAGE = (By.XPATH, "//h3[@data-test='error']")
    LOGIN_LOGO = (By.CLASS_NAME, "login_logo")
    LOGIN_WRAPPER = (By.CSS_SELECTOR, ".login_wrapper")

    def login(self, username: str, password: str) -> bool:
        """Fill the form and submit. Returns False if any control is missing."""
        return (
            self.type_text(self.USERNAME_FIELD, username)
            and self.type_text(self.PASSWORD_FIELD, password)
            and self.click(self.LOGIN_BUTTON)
        )

    def get_error_message(self) -> Optional[str]:
        return self.get_text(self.ERROR_MESSAGE)

    def is_username_field_displayed(self) -> bool:
        return self.is_displayed(self.USERNAME_FIELD)

    def is_password_field_displayed(self) -> bool:
        return self.is_displayed(self.PASSWORD_FIELD)

    def is_login_button_displayed(self) -> bool:
        return self.is_displayed(self.LOGIN_BUTTON)

    def is_login_logo_displayed(self) -> bool:
        return self.is_displayed(self.LOGIN_LOGO)

    def get_username_placeholder(self) -> Optional[str]:
        return self.get_attribute(self.USERNAME_FIELD, "placeholder")

    def get_password_placeholder(self) -> Optional[str]:
        return self.get_attribute(self.PASSWORD_FIELD, "placeholder")

    def get_login_button_text(self) -> Optional[str]:
        # The login control is an <input type="submit">, its label lives in 'value'
        return self.get_attribute(self.LOGIN_BUTTON, "value")
