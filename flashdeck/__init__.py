"""Terminal flashcard deck browser and study tool."""
