# infrastructure/seed.py
import logging
from typing import List

from domain.entities import Genre, Movie


def get_movies() -> List[Movie]:
    """
    Default catalog the app starts with. Every seeded movie carries its own id.
    """
    logging.debug("Building default movie catalog")
    return [
        Movie(
            id="tt0499549",
            title="Avatar",
            year="2009",
            genre=[Genre.ACTION, Genre.ADVENTURE, Genre.FANTASY],
            director="James Cameron",
            actors="Sam Worthington, Zoe Saldana, Sigourney Weaver, Stephen Lang",
            plot="A paraplegic marine dispatched to the moon Pandora on a unique mission "
                 "becomes torn between following his orders and protecting an alien civilization.",
            images=[
                "https://images-na.ssl-images-amazon.com/images/M/MV5BMjEyOTYyMzUxNl5BMl5BanBnXkFtZTcwNTg0MTUzNA@@._V1_SX1500_CR0,0,1500,999_AL_.jpg",
            ],
            rating=7.9,
        ),
        Movie(
            id="tt0416449",
            title="300",
            year="2006",
            genre=[Genre.ACTION, Genre.DRAMA, Genre.FANTASY],
            director="Zack Snyder",
            actors="Gerard Butler, Lena Headey, Dominic West, David Wenham",
            plot="King Leonidas of Sparta and a force of 300 men fight the Persians at Thermopylae in 480 B.C.",
            images=[
                "https://images-na.ssl-images-amazon.com/images/M/MV5BMTMwNTg5MzMwMV5BMl5BanBnXkFtZTcwMzA2NTIyMw@@._V1_SX1777_CR0,0,1777,937_AL_.jpg",
            ],
            rating=7.7,
        ),
        Movie(
            id="tt0848228",
            title="The Avengers",
            year="2012",
            genre=[Genre.ACTION, Genre.SCIFI, Genre.THRILLER],
            director="Joss Whedon",
            actors="Robert Downey Jr., Chris Evans, Mark Ruffalo, Chris Hemsworth",
            plot="Earth's mightiest heroes must come together and learn to fight as a team if they are to stop "
                 "the mischievous Loki and his alien army from enslaving humanity.",
            images=[
                "https://images-na.ssl-images-amazon.com/images/M/MV5BMTA0NjY0NzE4OTReQTJeQWpwZ15BbWU3MDczODg2Nzc@._V1_SX1777_CR0,0,1777,999_AL_.jpg",
            ],
            rating=8.1,
        ),
        Movie(
            id="tt0993846",
            title="The Wolf of Wall Street",
            year="2013",
            genre=[Genre.BIOGRAPHY, Genre.COMEDY, Genre.CRIME],
            director="Martin Scorsese",
            actors="Leonardo DiCaprio, Jonah Hill, Margot Robbie, Matthew McConaughey",
            plot="Based on the true story of Jordan Belfort, from his rise to a wealthy stock-broker "
                 "living the high life to his fall involving crime, corruption and the federal government.",
            images=[
                "https://images-na.ssl-images-amazon.com/images/M/MV5BNDIwMDIxNzk3Ml5BMl5BanBnXkFtZTgwMTg0MzQ4MDE@._V1_SX1500_CR0,0,1500,999_AL_.jpg",
            ],
            rating=8.2,
        ),
        Movie(
            id="tt0816692",
            title="Interstellar",
            year="2014",
            genre=[Genre.ADVENTURE, Genre.DRAMA, Genre.SCIFI],
            director="Christopher Nolan",
            actors="Ellen Burstyn, Matthew McConaughey, Mackenzie Foy, John Lithgow",
            plot="A team of explorers travel through a wormhole in space in an attempt to ensure humanity's survival.",
            images=[
                "https://images-na.ssl-images-amazon.com/images/M/MV5BMjA3NTEwOTMxMV5BMl5BanBnXkFtZTgwMjMyODgzMTE@._V1_SX1500_CR0,0,1500,999_AL_.jpg",
            ],
            rating=8.6,
        ),
    ]
