# Local REST surface for running Reminders nodes over HTTP.
# Created: 2026-03-02
