"""
Modules package initialization.
Each functional area of the API lives in its own subpackage:
auth, profiles, posts (with comments and reactions), home_feed, follows,
notifications, messages, gyms, training_logs, mentorship, media,
link_preview and realtime.
"""
