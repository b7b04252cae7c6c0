"""Relay GiveWP donation webhooks to a Brevo contact list."""
