from route_sentinel.news.base import NewsSearcher
from route_sentinel.news.newsapi import MAX_ARTICLES, NewsAPISearcher

__all__ = ["MAX_ARTICLES", "NewsAPISearcher", "NewsSearcher"]
