trade = (
    '{"e":"trade","E":1759680390108723,"s":"ETHUSDT","t":2921785139,'
    '"p":"4532.56000000","q":"0.01320000","T":1759680390108254,"m":true,"M":true}'
)

trade_with_bad_price = (
    '{"e":"trade","E":1759680390108723,"s":"ETHUSDT","t":2921785139,'
    '"p":"not-a-number","q":"0.01320000","T":1759680390108254,"m":true,"M":true}'
)

trade_with_numeric_price = (
    '{"e":"trade","E":1759680390108723,"s":"ETHUSDT","t":2921785139,'
    '"p":4532.56,"q":"0.01320000","T":1759680390108254,"m":true,"M":true}'
)

trade_without_symbol = (
    '{"e":"trade","E":1759680390108723,"t":2921785139,'
    '"p":"4532.56000000","q":"0.01320000","T":1759680390108254,"m":true,"M":true}'
)

subscription_request = '{"method":"SUBSCRIBE","params":["btcusdt@ticker"],"id":100}'

subscription_response = '{"result":["btcusdt@ticker","ethusdt@depth"],"id":300}'

null_subscription_response = '{"result":null,"id":500}'

empty_subscription_response = '{"result":[],"id":500}'

depth_update = '{"e":"depthUpdate","E":1759680390108723,"s":"ETHUSDT","b":[],"a":[]}'
