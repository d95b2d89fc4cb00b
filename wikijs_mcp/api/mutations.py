"""
API - Mutations

GraphQL write operations. Wiki.js expects the full page record on update.
"""

CREATE_PAGE = """
  mutation CreatePage(
    $content: String!
    $description: String!
    $editor: String!
    $isPublished: Boolean!
    $isPrivate: Boolean!
    $locale: String!
    $path: String!
    $tags: [String]!
    $title: String!
  ) {
    pages {
      create(
        content: $content
        description: $description
        editor: $editor
        isPublished: $isPublished
        isPrivate: $isPrivate
        locale: $locale
        path: $path
        tags: $tags
        title: $title
      ) {
        responseResult {
          succeeded
          errorCode
          slug
          message
        }
        page {
          id
          path
          title
          description
          content
          isPublished
          locale
          createdAt
          updatedAt
        }
      }
    }
  }
"""

UPDATE_PAGE = """
  mutation UpdatePage(
    $id: Int!
    $content: String!
    $description: String!
    $editor: String!
    $isPublished: Boolean!
    $isPrivate: Boolean!
    $locale: String!
    $path: String!
    $tags: [String]!
    $title: String!
  ) {
    pages {
      update(
        id: $id
        content: $content
        description: $description
        editor: $editor
        isPublished: $isPublished
        isPrivate: $isPrivate
        locale: $locale
        path: $path
        tags: $tags
        title: $title
      ) {
        responseResult {
          succeeded
          errorCode
          slug
          message
        }
        page {
          id
          path
          title
          description
          content
          isPublished
          locale
          updatedAt
        }
      }
    }
  }
"""

DELETE_PAGE = """
  mutation DeletePage($id: Int!) {
    pages {
      delete(id: $id) {
        responseResult {
          succeeded
          errorCode
          slug
          message
        }
      }
    }
  }
"""
