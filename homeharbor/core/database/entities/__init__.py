"""
Database entity models.

One module per table:

- users: Accounts (password or Firebase sign-in)
- properties: Real-estate listings
- locations: Curated cities
- favorites: User bookmarks
- messages: Contact messages
- settings: Key/value JSON settings
- footer_contents: Footer links
- page_contents: Editable page blocks
- neighborhoods: Neighborhood guides
- posts: Blog articles
- static_pages: Static page bodies
- crime_data: Monthly offence statistics
"""

from .crime_data import CrimeData
from .favorites import Favorite
from .footer_contents import FooterContent
from .locations import Location
from .messages import Message
from .neighborhoods import Neighborhood
from .page_contents import PageContent
from .posts import Post
from .properties import Property
from .settings import Setting
from .static_pages import StaticPage
from .users import User

__all__ = [
    "CrimeData",
    "Favorite",
    "FooterContent",
    "Location",
    "Message",
    "Neighborhood",
    "PageContent",
    "Post",
    "Property",
    "Setting",
    "StaticPage",
    "User",
]
