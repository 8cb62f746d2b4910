"""Course attendance package.

Organized by feature modules (users, courses, attendance, credentials, remote)
with a thin Flask controller layer over service/repository layers; ``store``
ties them into the single-session Domain Store that UI and API layers call.
"""
