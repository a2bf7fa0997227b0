"""Internal constants shared across the library."""

DOG_API_BASE_URL = "https://dog.ceo/api"
RANDOM_DOG_IMAGE_PATH = "/breeds/image/random"

POSTS_API_BASE_URL = "https://jsonplaceholder.typicode.com"
POSTS_PATH = "/posts"

USER_AGENT = "pydoggo/aiohttp"
