"""Blackjack rules: scoring, constants and player actions."""
