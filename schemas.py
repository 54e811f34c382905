book = {
    "type": "object",
    "required": ["id", "title", "description", "pageCount", "excerpt", "publishDate"],
    "properties": {
        "id": {
            "type": "integer"
        },
        "title": {
            "type": "string"
        },
        "description": {
            "type": "string"
        },
        "pageCount": {
            "type": "integer"
        },
        "excerpt": {
            "type": "string"
        },
        "publishDate": {
            "type": "string",
        },
    }
}


author = {
    "type": "object",
    "required": ["id", "idBook", "firstName", "lastName"],
    "properties": {
        "id": {
            "type": "integer"
        },
        "idBook": {
            "type": "integer"
        },
        "firstName": {
            "type": "string"
        },
        "lastName": {
            "type": "string"
        },
    }
}


book_list = {
    "type": "array",
    "items": book
}

author_list = {
    "type": "array",
    "items": author
}
