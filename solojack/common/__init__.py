"""Cards, decks, hands and the IO layer shared by the rest of solojack."""
