"""Mattermost app versions: tally desktop and mobile client versions from active sessions."""
