"""Bundled movies served when the catalog API is unavailable.

Sample ids are prefixed with ``sample-`` and never share a value with a
TMDB id.
"""

# ruff: noqa: E501

from movie_match.domain.movies import Movie

SAMPLE_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"


def _sample(  # noqa: PLR0913
    movie_id: str,
    title: str,
    year: int,
    poster_path: str,
    genres: tuple[str, ...],
    rating: float,
    streaming_on: tuple[str, ...],
    synopsis: str,
) -> Movie:
    return Movie(
        id=movie_id,
        title=title,
        year=year,
        poster_url=f"{SAMPLE_IMAGE_BASE_URL}{poster_path}",
        genres=genres,
        rating=rating,
        streaming_on=streaming_on,
        synopsis=synopsis,
    )


SAMPLE_MOVIES: tuple[Movie, ...] = (
    _sample(
        "sample-1",
        "The Shawshank Redemption",
        1994,
        "/q6y0Go1tsGEsmtFryDOJo3dEmqu.jpg",
        ("Drama",),
        9.3,
        ("Netflix", "Prime Video"),
        "Two imprisoned men bond over a number of years, finding solace and eventual redemption.",
    ),
    _sample(
        "sample-2",
        "The Godfather",
        1972,
        "/3bhkrj58Vtu7enYsRolD1fZdja1.jpg",
        ("Crime", "Drama"),
        9.2,
        ("Paramount+", "Prime Video"),
        "The aging patriarch of an organized crime dynasty transfers control to his reluctant son.",
    ),
    _sample(
        "sample-3",
        "The Dark Knight",
        2008,
        "/qJ2tW6WMUDux911r6m7haRef0WH.jpg",
        ("Action", "Crime", "Drama"),
        9.0,
        ("HBO Max", "Prime Video"),
        "Batman faces his greatest challenge as the Joker wreaks havoc on Gotham City.",
    ),
    _sample(
        "sample-4",
        "Pulp Fiction",
        1994,
        "/d5iIlFn5s0ImszYzBPb8JPIfbXD.jpg",
        ("Crime", "Drama"),
        8.9,
        ("Netflix", "Hulu"),
        "The lives of two mob hitmen, a boxer, and a pair of diner bandits intertwine.",
    ),
    _sample(
        "sample-5",
        "Forrest Gump",
        1994,
        "/arw2vcBveWOVZr6pxd9XTd1TdQa.jpg",
        ("Drama", "Romance"),
        8.8,
        ("Paramount+", "Prime Video"),
        "Decades of American history unfold through the perspective of a simple Alabama man.",
    ),
    _sample(
        "sample-6",
        "Inception",
        2010,
        "/9gk7adHYeDvHkCSEqAvQNLV5Uge.jpg",
        ("Action", "Sci-Fi", "Thriller"),
        8.8,
        ("HBO Max", "Netflix"),
        "A thief who steals corporate secrets through dream-sharing technology.",
    ),
    _sample(
        "sample-7",
        "The Matrix",
        1999,
        "/f89U3ADr1oiB1s9GkdPOEpXUk5H.jpg",
        ("Action", "Sci-Fi"),
        8.7,
        ("HBO Max", "Prime Video"),
        "A computer hacker learns about the true nature of his reality.",
    ),
    _sample(
        "sample-8",
        "Goodfellas",
        1990,
        "/aKuFiU82s5ISJpGZp7YkIr3kCUd.jpg",
        ("Crime", "Drama"),
        8.7,
        ("HBO Max", "Prime Video"),
        "The story of Henry Hill and his life in the mob.",
    ),
    _sample(
        "sample-9",
        "Interstellar",
        2014,
        "/gEU2QniE6E77NI6lCU6MxlNBvIx.jpg",
        ("Adventure", "Drama", "Sci-Fi"),
        8.6,
        ("Paramount+", "Prime Video"),
        "A team of explorers travel through a wormhole in space to save humanity.",
    ),
    _sample(
        "sample-10",
        "Parasite",
        2019,
        "/7IiTTgloJzvGI1TAYymCfbfl3vT.jpg",
        ("Comedy", "Drama", "Thriller"),
        8.6,
        ("Hulu", "Prime Video"),
        "Greed and class discrimination threaten the newly formed symbiotic relationship.",
    ),
    _sample(
        "sample-11",
        "Spirited Away",
        2001,
        "/39wmItIWsg5sZMyRUHLkWBcuVCM.jpg",
        ("Animation", "Adventure", "Fantasy"),
        8.6,
        ("HBO Max", "Netflix"),
        "A girl enters a magical world where she must work to free her parents.",
    ),
    _sample(
        "sample-12",
        "The Green Mile",
        1999,
        "/velWPhVMQeQKcxggNEU8YmIo52R.jpg",
        ("Crime", "Drama", "Fantasy"),
        8.6,
        ("HBO Max", "Prime Video"),
        "A death row prison guard meets a man with a mysterious gift.",
    ),
    _sample(
        "sample-13",
        "La La Land",
        2016,
        "/uDO8zWDhfWwoFdKS4fzkUJt0Rf0.jpg",
        ("Comedy", "Drama", "Music", "Romance"),
        8.0,
        ("Netflix", "Prime Video"),
        "An aspiring actress and jazz musician fall in love while pursuing their dreams in LA.",
    ),
    _sample(
        "sample-14",
        "Eternal Sunshine of the Spotless Mind",
        2004,
        "/5MwkWH9tYHv3mV9OdYTMR5qreIz.jpg",
        ("Drama", "Romance", "Sci-Fi"),
        8.3,
        ("Prime Video", "Hulu"),
        "A couple undergo a procedure to erase each other from their memories.",
    ),
    _sample(
        "sample-15",
        "Amélie",
        2001,
        "/nSxDa3M9aMvGVLoItzWTepQ5h5d.jpg",
        ("Comedy", "Romance"),
        8.3,
        ("Prime Video", "Netflix"),
        "A shy waitress decides to change the lives of those around her for the better.",
    ),
    _sample(
        "sample-16",
        "Whiplash",
        2014,
        "/7fn624j5lj3xTme2SgiLCeuedmO.jpg",
        ("Drama", "Music"),
        8.5,
        ("Netflix", "Prime Video"),
        "A young drummer faces a ruthless music instructor at a prestigious conservatory.",
    ),
    _sample(
        "sample-17",
        "Everything Everywhere All at Once",
        2022,
        "/w3LxiVYdWWRvEVdn5RYq6jIqkb1.jpg",
        ("Action", "Adventure", "Sci-Fi"),
        8.0,
        ("Paramount+", "Prime Video"),
        "A woman must connect with parallel universe versions of herself to save the multiverse.",
    ),
    _sample(
        "sample-18",
        "Moonlight",
        2016,
        "/4911T5FbJ9eD2Faz5Z8L7keSDuA.jpg",
        ("Drama",),
        7.4,
        ("Netflix", "Prime Video"),
        "A young black man grapples with his identity and sexuality in Miami.",
    ),
    _sample(
        "sample-19",
        "Her",
        2013,
        "/lEIaL12hSkqqe83kgADkbUqEnvk.jpg",
        ("Drama", "Romance", "Sci-Fi"),
        8.0,
        ("HBO Max", "Prime Video"),
        "A lonely writer develops an unlikely relationship with an AI operating system.",
    ),
    _sample(
        "sample-20",
        "The Grand Budapest Hotel",
        2014,
        "/eWdyYQreja6JGCzqHWXpWHDrrPo.jpg",
        ("Comedy", "Drama"),
        8.1,
        ("Disney+", "Prime Video"),
        "A legendary concierge and his protégé become embroiled in a theft and murder.",
    ),
    _sample(
        "sample-21",
        "Knives Out",
        2019,
        "/pThyQovXQrw2m0s9x82twj48Jq4.jpg",
        ("Comedy", "Crime", "Mystery"),
        7.9,
        ("Netflix", "Prime Video"),
        "A detective investigates the death of a patriarch of an eccentric family.",
    ),
    _sample(
        "sample-22",
        "The Breakfast Club",
        1985,
        "/5AJNhKJrsaiPVnhqy6vQR1O7XrX.jpg",
        ("Comedy", "Drama"),
        7.8,
        ("Prime Video", "Hulu"),
        "Five high school students from different walks of life spend Saturday in detention.",
    ),
    _sample(
        "sample-23",
        "Before Sunrise",
        1995,
        "/3WfgycJVAezqVvw7JjRHNcdj0uP.jpg",
        ("Drama", "Romance"),
        8.1,
        ("HBO Max", "Prime Video"),
        "A young man and woman meet on a train and spend one night together in Vienna.",
    ),
    _sample(
        "sample-24",
        "Coco",
        2017,
        "/gGEsBPAijhVUFoiNpgZXqRVWJt2.jpg",
        ("Animation", "Adventure", "Family"),
        8.4,
        ("Disney+",),
        "A young boy travels to the Land of the Dead to discover his family history.",
    ),
    _sample(
        "sample-25",
        "Arrival",
        2016,
        "/x2FJsf1ElAgr63Y3PNPtJrcmpoe.jpg",
        ("Drama", "Sci-Fi"),
        7.9,
        ("Paramount+", "Prime Video"),
        "A linguist works with the military to communicate with alien visitors.",
    ),
    _sample(
        "sample-26",
        "Blade Runner 2049",
        2017,
        "/gajva2L0rPYkEWjzgFlBXCAVBE5.jpg",
        ("Drama", "Sci-Fi", "Thriller"),
        8.0,
        ("HBO Max", "Prime Video"),
        "A young blade runner's discovery threatens to plunge society into chaos.",
    ),
    _sample(
        "sample-27",
        "The Princess Bride",
        1987,
        "/gpxjoE0yvRwIhFEJgNArtKtWRbn.jpg",
        ("Adventure", "Comedy", "Romance"),
        8.0,
        ("Disney+", "Hulu"),
        "A fairy tale adventure about a beautiful princess and her one true love.",
    ),
    _sample(
        "sample-28",
        "Mad Max: Fury Road",
        2015,
        "/hA2ple9q4qnwxp3hKVNhroipsir.jpg",
        ("Action", "Adventure", "Sci-Fi"),
        8.1,
        ("HBO Max", "Prime Video"),
        "A woman rebels against a tyrannical ruler in postapocalyptic Australia.",
    ),
    _sample(
        "sample-29",
        "Dune",
        2021,
        "/d5NXSklXo0qyIYkgV94XAgMIckC.jpg",
        ("Adventure", "Sci-Fi"),
        8.0,
        ("HBO Max", "Prime Video"),
        "A noble family becomes embroiled in a war for control of the desert planet Arrakis.",
    ),
    _sample(
        "sample-30",
        "Spider-Man: Into the Spider-Verse",
        2018,
        "/iiZZdoQBEYBv6id8su7ImL0oCbD.jpg",
        ("Action", "Adventure", "Animation"),
        8.4,
        ("Netflix", "Prime Video"),
        "Teen Miles Morales teams up with Spider-People from other dimensions.",
    ),
    _sample(
        "sample-31",
        "The Truman Show",
        1998,
        "/vuza0WqY239yBXOadKlGwJsZJFE.jpg",
        ("Comedy", "Drama", "Sci-Fi"),
        8.2,
        ("Paramount+", "Prime Video"),
        "A man discovers his entire life is a TV show watched by millions.",
    ),
    _sample(
        "sample-32",
        "Encanto",
        2021,
        "/4j0PNHkMr5ax3IA8tjtxcmPU3QT.jpg",
        ("Animation", "Comedy", "Family", "Fantasy"),
        7.2,
        ("Disney+",),
        "A Colombian girl struggles as the only member of her family without magical powers.",
    ),
    _sample(
        "sample-33",
        "The Social Network",
        2010,
        "/n0ybibhJtQ5icDqTp8eRytcIHJx.jpg",
        ("Drama",),
        7.7,
        ("Netflix", "Prime Video"),
        "The founding of Facebook and the lawsuits that followed.",
    ),
    _sample(
        "sample-34",
        "Toy Story",
        1995,
        "/uXDfjJbdP4ijW5hWSBrPrlKpxab.jpg",
        ("Animation", "Adventure", "Comedy", "Family"),
        8.3,
        ("Disney+",),
        "Toys come to life when humans are not around.",
    ),
    _sample(
        "sample-35",
        "Inglourious Basterds",
        2009,
        "/7sfbEnaARXDDhKm0CZ7D7uc2sbo.jpg",
        ("Action", "Drama", "War"),
        8.3,
        ("Netflix", "Prime Video"),
        "Allied soldiers plot to assassinate Nazi leaders in occupied France.",
    ),
    _sample(
        "sample-36",
        "The Departed",
        2006,
        "/nT97ifVT2J1yMQmeq20Qblg61T.jpg",
        ("Crime", "Drama", "Thriller"),
        8.5,
        ("HBO Max", "Prime Video"),
        "An undercover cop and a mole in the police try to identify each other.",
    ),
    _sample(
        "sample-37",
        "WALL-E",
        2008,
        "/hbhFnRzzg6ZDmm8YAmxBnQpQIPh.jpg",
        ("Animation", "Family", "Sci-Fi"),
        8.4,
        ("Disney+",),
        "A robot left to clean Earth falls in love and follows her across the galaxy.",
    ),
    _sample(
        "sample-38",
        "Up",
        2009,
        "/vpbaStTMt8qqXaEgnOR2EE4DNJk.jpg",
        ("Animation", "Adventure", "Comedy", "Family"),
        8.3,
        ("Disney+",),
        "An elderly man ties thousands of balloons to his house and flies to South America.",
    ),
    _sample(
        "sample-39",
        "Django Unchained",
        2012,
        "/7oWY8VDWW7thTzWh3OKYRkWUlD5.jpg",
        ("Drama", "Western"),
        8.4,
        ("Netflix", "Prime Video"),
        "A freed slave teams up with a bounty hunter to rescue his wife.",
    ),
    _sample(
        "sample-40",
        "No Country for Old Men",
        2007,
        "/bj1v6YKF8yHqA489VFfnQvOJpnc.jpg",
        ("Crime", "Drama", "Thriller"),
        8.1,
        ("Netflix", "Prime Video"),
        "A hunter stumbles upon drug money and is pursued by a relentless killer.",
    ),
    _sample(
        "sample-41",
        "The Big Lebowski",
        1998,
        "/d9BdxJH0bXV0czaOGOeLdZnJtS.jpg",
        ("Comedy", "Crime"),
        8.1,
        ("Prime Video", "Hulu"),
        "The Dude gets mistaken for a millionaire and becomes involved in a kidnapping.",
    ),
    _sample(
        "sample-42",
        "The Prestige",
        2006,
        "/5MXyQfz8xUP3dIFPTubhTsbFY6N.jpg",
        ("Drama", "Mystery", "Thriller"),
        8.5,
        ("HBO Max", "Prime Video"),
        "Two magicians engage in a bitter rivalry after a tragic accident.",
    ),
    _sample(
        "sample-43",
        "Finding Nemo",
        2003,
        "/eHuGQ10FUzK1mdOY69wF5pGgEf5.jpg",
        ("Animation", "Adventure", "Family"),
        8.1,
        ("Disney+",),
        "A clownfish searches the ocean for his missing son.",
    ),
    _sample(
        "sample-44",
        "Shutter Island",
        2010,
        "/4GDy0PHYX3VRXUtwK5ysFbg3kEx.jpg",
        ("Drama", "Mystery", "Thriller"),
        8.2,
        ("Paramount+", "Prime Video"),
        "A U.S. Marshal investigates a disappearance at an asylum for the criminally insane.",
    ),
    _sample(
        "sample-45",
        "The Lion King",
        1994,
        "/sKCr78MXSLixwmZ8DyJLrpMsd15.jpg",
        ("Animation", "Adventure", "Drama", "Family"),
        8.5,
        ("Disney+",),
        "A lion cub prince flees his kingdom only to learn the meaning of responsibility.",
    ),
    _sample(
        "sample-46",
        "Ratatouille",
        2007,
        "/npHNjldbeTHdKKw28bJKs7lzqzj.jpg",
        ("Animation", "Comedy", "Family"),
        8.0,
        ("Disney+",),
        "A rat who can cook makes an unusual alliance with a young kitchen worker.",
    ),
    _sample(
        "sample-47",
        "Howl's Moving Castle",
        2004,
        "/6pZgH10jhpToPcf7H44xm3Qb2KF.jpg",
        ("Animation", "Adventure", "Fantasy"),
        8.2,
        ("HBO Max", "Netflix"),
        "A young woman is cursed with an old body and must seek a wizard to break the spell.",
    ),
    _sample(
        "sample-48",
        "Princess Mononoke",
        1997,
        "/cMYCDADoLKLbB83g4WnJegaZimC.jpg",
        ("Animation", "Adventure", "Fantasy"),
        8.4,
        ("HBO Max", "Netflix"),
        "A young man battles to find a cure and finds himself in a struggle between nature and industry.",
    ),
    _sample(
        "sample-49",
        "The Sixth Sense",
        1999,
        "/4AfSDjjCy6T5LA1TMz0Lh2HlpRs.jpg",
        ("Drama", "Mystery", "Thriller"),
        8.1,
        ("Paramount+", "Prime Video"),
        "A boy who communicates with spirits seeks the help of a child psychologist.",
    ),
    _sample(
        "sample-50",
        "Fight Club",
        1999,
        "/pB8BM7pdSp6B6Ih7QZ4DrQ3PmJK.jpg",
        ("Drama",),
        8.8,
        ("HBO Max", "Prime Video"),
        "An insomniac office worker forms an underground fight club.",
    ),
)

SAMPLE_MOVIES_BY_ID = {movie.id: movie for movie in SAMPLE_MOVIES}


def sample_page(page: int, page_size: int = 20) -> list[Movie]:
    """Return one page of the bundled movies; empty past the end."""
    if page < 1:
        return []
    start = (page - 1) * page_size
    return list(SAMPLE_MOVIES[start : start + page_size])
