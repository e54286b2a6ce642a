"""
Accounts app: admin sign-in, the dashboard summary and the management
commands that bootstrap the site (admin account, default content).

Admins are ordinary Django users flagged ``is_staff`` (role ``admin``)
or ``is_superuser`` (role ``super-admin``); no custom user model.
"""
