"""Fetch Hacker News top stories by scraping the listing or calling the JSON API."""
