"""Board model, retry helpers and live-target plumbing shared by the test suites."""
