"""Client-side routes the backend navigates to or links against."""

HOME_ROUTE = "/"
ARTICLE_ROUTE = "/article/{article_id}"
ADMIN_ROUTE = "/admin"
