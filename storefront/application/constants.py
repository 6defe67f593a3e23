INDEX_PATH = "/"
SEARCH_PATH = "/search"
SEARCH_QUERY_PARAM = "s"

FIELD_NAME_AUTHOR = "author"
FIELD_NAME_TITLE = "title"
FIELD_NAME_REVIEW = "review"
FIELD_NAME_RATE = "rate"

PIPELINE_GET_PRODUCT_VARIANTS = "getProductVariants"
PIPELINE_ADD_PRODUCT_REVIEW = "addProductReview"
PIPELINE_UPDATE_PRODUCT_REVIEW = "updateProductReview"
