"""Constants and defaults.

Note: Keep user-facing messages here so the store, services and tests agree on them.
"""

MSG_FILL_ALL_FIELDS = "Please fill in all fields"
MSG_EMAIL_EXISTS = "Email already exists"
MSG_INVALID_CREDENTIALS = "Invalid credentials"
MSG_NOT_ALLOWED = "You are not allowed to perform this action"

MSG_REGISTERED = "Registration successful! Please login with your credentials."
MSG_LOGGED_IN = "Login successful"
MSG_COURSE_ADDED = "Course added successfully"
MSG_MARKED_PRESENT = "Marked as Present"
MSG_MARKED_ABSENT = "Marked as Absent"
MSG_RESET_EMAIL_SENT = "Reset email sent!"
MSG_PROFILE_UPDATED = "Profile updated"

DEFAULT_CREDENTIALS_NAMESPACE = "attendance_prefs"
KEY_USER_EMAIL = "user_email"
KEY_USER_PASSWORD = "user_password"
KEY_REMEMBER_ME = "remember_me"

GOOD_STANDING_PERCENT = 75
WARNING_STANDING_PERCENT = 50
