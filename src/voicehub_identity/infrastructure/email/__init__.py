from voicehub_identity.infrastructure.email.email_service import EmailService

__all__ = ["EmailService"]
