"""
API - Queries

GraphQL read operations against the Wiki.js pages API.
"""

LIST_PAGES = """
  query {
    pages {
      list {
        id
        path
        title
        description
        isPublished
        locale
        updatedAt
      }
    }
  }
"""

GET_PAGE = """
  query GetPage($path: String!, $locale: String!) {
    pages {
      singleByPath(path: $path, locale: $locale) {
        id
        path
        title
        description
        content
        isPublished
        isPrivate
        locale
        createdAt
        updatedAt
      }
    }
  }
"""

# Tags are only available on the single-page projection.
GET_PAGE_BY_ID = """
  query GetPageById($id: Int!) {
    pages {
      single(id: $id) {
        id
        path
        title
        description
        content
        isPublished
        isPrivate
        locale
        createdAt
        updatedAt
        tags {
          id
          tag
          title
        }
      }
    }
  }
"""

SEARCH_PAGES = """
  query SearchPages($query: String!) {
    pages {
      search(query: $query) {
        results {
          id
          path
          title
          description
        }
        totalHits
      }
    }
  }
"""

LIST_TAGS = """
  query {
    pages {
      tags {
        id
        tag
        title
        createdAt
        updatedAt
      }
    }
  }
"""
