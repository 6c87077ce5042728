"""generate-quote 接口附带的 CORS 响应头 (预检请求与普通响应相同)。"""

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}
