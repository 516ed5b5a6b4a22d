from .session import Session, SessionConfig
