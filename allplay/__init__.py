"""All-play fantasy standings for Sleeper leagues."""
