"""
Selector Schema

Fixed CSS selectors for every extraction routine, plus the site constants
the URL rules depend on. Selectors use the soupsieve dialect understood by
BeautifulSoup.select().
"""

# Site constants
BASE_URL = "https://readcomicsonline.ru/"
HTTPS_PREFIX = "https"
COMIC_PREFIX = "/comic/"
WEEKLY_UPLOAD_PREFIX = "weekly-comic-upload-"
COMIC_URL_TEMPLATE = BASE_URL + "comic/{slug}"
THUMBNAIL_TEMPLATE = BASE_URL + "uploads/manga/{slug}/cover/cover_250x350.jpg"

# Common attributes
SRC = "src"
HREF = "href"
DATA_SRC = "data-src"
ALT = "alt"

# Hot updates
HOT_UPDATES_THUMBNAILS = "div.schedule-avatar img[src]"
HOT_UPDATES_NAMES = "div.schedule-name"
HOT_UPDATES_ISSUES = "a.schedule-add"
HOT_UPDATES_COMIC_LINKS = "div.schedule-name a[href]"

# Weekly uploads
WEEKLY_UPLOAD_LINKS = "div.manganews h3.manga-heading>a[href]"
WEEKLY_PACK_COMICS = "p ~ ul>li a[href]"

# Chapter pages
CHAPTER_PAGE_IMAGES = "div#all img"

# Latest updates
LATEST_ISSUE_LINKS = "div.mangalist h6.events-subtitle a[href]"
LATEST_COMIC_DETAILS = "h3.manga-heading > a[href]"

# Comics by category
CATEGORY_COMIC_NAMES = "h5.media-heading > a.chart-title"
CATEGORY_THUMBNAILS = "div.media-left > a[href] > img[src]"
CATEGORY_COMIC_LINKS = "div.media-left > a[href]"

# Comic details; the table alternates dt/dd so every dd sits at an even child position
DETAILS_TABLE = "dl.dl-horizontal"
DETAILS_TYPE = f"{DETAILS_TABLE} dd:nth-child(2)"
DETAILS_STATUS = f"{DETAILS_TABLE} dd:nth-child(4)"
DETAILS_YEAR = f"{DETAILS_TABLE} dd:nth-child(6)"
DETAILS_CATEGORY = f"{DETAILS_TABLE} dd:nth-child(8)"
DETAILS_SUMMARY = "div.manga:has(p) p"
DETAILS_COVER = "div.boxed > img.img-responsive"
DETAILS_TITLE = "h2.listmanga-header"
DETAILS_CHAPTERS = "ul.chapters a[href]"

# Popular comics
POPULAR_COMICS = "li.list-group-item h5.media-heading a[href]"
