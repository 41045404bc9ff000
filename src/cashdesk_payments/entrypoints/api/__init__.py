from cashdesk_payments.entrypoints.api.app import create_app

__all__ = ["create_app"]
