from enum import Enum


class Interest(str, Enum):
    photography = "Photography"
    hiking = "Hiking"
    travel = "Travel"
    music = "Music"
    cooking = "Cooking"
    programming = "Programming"
    art = "Art"
    reading = "Reading"
    gaming = "Gaming"
    sports = "Sports"
    dancing = "Dancing"
    movies = "Movies"
    gardening = "Gardening"
    volunteering = "Volunteering"
    yoga = "Yoga"
    meditation = "Meditation"
    writing = "Writing"
    crafts = "Crafts"
