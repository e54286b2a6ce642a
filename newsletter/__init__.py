"""
Newsletter app: subscriptions and the bulk email dispatcher.

Subscribers sign up through the public API; admins broadcast an update
to every active subscriber through Brevo's transactional email API
(see ``newsletter.services``).
"""
