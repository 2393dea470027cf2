"""Offline phrase catalog: curated Chinese/Korean travel phrases in six categories."""
from typing import Dict, List, Tuple

from phrase_router.models.internal_models import PhraseCategory, PhraseEntry


RESTAURANT_PHRASES = (
    PhraseEntry("restaurant_01", "请问这个多少钱？", "이거 얼마예요?", "Igeo eolmayeyo?", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_02", "我要点这个", "이걸로 주문할게요", "Igeollo jumunhalgeyo", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_03", "太辣了", "너무 매워요", "Neomu maewoyo", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_04", "有素食吗？", "채식 있나요?", "Chaesik innayo?", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_05", "请给我菜单", "메뉴 주세요", "Menyu juseyo", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_06", "水，谢谢", "물 주세요", "Mul juseyo", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_07", "结账", "계산해 주세요", "Gyesanhae juseyo", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_08", "好吃！", "맛있어요!", "Masisseoyo!", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_09", "有推荐吗？", "추천해 주세요", "Chucheonhae juseyo", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_10", "还要点别的吗？", "더 주문하시겠어요?", "Deo jumunhasigesseoyo?", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_11", "这里有人坐吗？", "여기 앉아도 되요?", "Yeogi anjado doeyo?", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_12", "我预订了位置", "예약했어요", "Yeyakhaesseoyo", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_13", "可以打包吗？", "포장해 주세요", "Pojanghae juseyo", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_14", "我不吃...", "안 먹는 게 있어요", "An meonneun ge isseoyo", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_15", "太咸了", "너무 짜요", "Neumo jayoyo", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_16", "我想预订今晚7点的位置", "오늘 저녁 7시에 예약하고 싶어요", "Oneul jeonyeok 7sie yeyakago sipeoyo", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_17", "有2个人的位置吗？", "2명 자리 있나요?", "2myeong jari innayo?", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_18", "可以订靠窗的位置吗？", "창가 자리로 예약할 수 있나요?", "Changga jariro yeyakhal su innayo?", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_19", "请问电话号码是多少？", "전화번호 알려주세요", "Jeonhwabeo alryeojuseyo", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_20", "可以不要太辣吗？", "안 매운 걸로 해주세요", "An maeun geollo haejuseyo", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_21", "这是热的还是冰的？", "이거 뜨거운 거예요? 차가운 거예요?", "Igeo tteugeoun geoyeo? Chagaun geoyeo?", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_22", "可以加饭吗？", "밥 더 주실 수 있나요?", "Bap deo jusil su innayo?", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_23", "这个份量大吗？", "양 많나요?", "Yang manna yo?", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_24", "我对海鲜过敏", "해산물 알레르기 있어요", "Haesanmul allereugi isseoyo", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_25", "有清真食品吗？", "할랄 음식 있나요?", "Hallal eumsik innayo?", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_26", "我不吃牛肉", "소고기 안 먹어요", "Sogogi an meogeoyo", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_27", "可以不放蒜吗？", "마늘 빼주세요", "Manul ppaejuseyo", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_28", "可以分开付吗？", "따로 계산할 수 있나요?", "Ttaro gyesanhal su innayo?", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_29", "这里可以刷卡吗？", "카드 돼요?", "Kadeu dwaeyo?", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_30", "含税吗？", "세금 포함돼어 있나요?", "Segeom pohamdoeo innayo?", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_31", "要给小费吗？", "팁 주어야 하나요?", "Tip jueoya hanayo?", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_32", "这个菜太咸了", "반찬 너무 짜요", "Banchan neomu jayo", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_33", "等太久了", "너무 오래 기다렸어요", "Neomu orae gidaryeosseoyo", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_34", "菜里面有头发", "음식에 머리카락이 들어있어요", "Eumsige meorikaraki deureoissoyo", PhraseCategory.RESTAURANT),
    PhraseEntry("restaurant_35", "服务真好", "서비스 좋아요", "Seobisu joayo", PhraseCategory.RESTAURANT),
)

SHOPPING_PHRASES = (
    PhraseEntry("shopping_01", "可以试穿吗？", "입어봐도 되요?", "Ibeobwado doeyo?", PhraseCategory.SHOPPING),
    PhraseEntry("shopping_02", "有折扣吗？", "할인되나요?", "Halindoeyo?", PhraseCategory.SHOPPING),
    PhraseEntry("shopping_03", "我要买这个", "이거 살게요", "Igeo salgeyo", PhraseCategory.SHOPPING),
    PhraseEntry("shopping_04", "这个颜色有别的吗？", "다른 색상 있나요?", "Dareun saeksaeng innayo?", PhraseCategory.SHOPPING),
    PhraseEntry("shopping_05", "有更大的吗？", "더 큰 사이즈 있나요?", "Deo keun saijeu innayo?", PhraseCategory.SHOPPING),
    PhraseEntry("shopping_06", "可以刷卡吗？", "카드 돼나요?", "Kadeu dwaenayo?", PhraseCategory.SHOPPING),
    PhraseEntry("shopping_07", "能退款吗？", "환불돼나요?", "Hwanbuldwaaenayo?", PhraseCategory.SHOPPING),
    PhraseEntry("shopping_08", "有发票吗？", "영수증 있나요?", "Yeongsujeung innayo?", PhraseCategory.SHOPPING),
    PhraseEntry("shopping_09", "多少钱？", "얼마예요?", "Eolmayeyo?", PhraseCategory.SHOPPING),
    PhraseEntry("shopping_10", "太贵了", "너무 비싸요", "Neomu bissayo", PhraseCategory.SHOPPING),
    PhraseEntry("shopping_11", "可以便宜点吗？", "깎아 주세요", "Ggaka juseyo", PhraseCategory.SHOPPING),
    PhraseEntry("shopping_12", "我要看看别的", "다른 거 볼게요", "Dareun geo bolgeyo", PhraseCategory.SHOPPING),
    PhraseEntry("shopping_13", "这是真品吗？", "이거 정품이에요?", "Igeo jeongpumieyo?", PhraseCategory.SHOPPING),
    PhraseEntry("shopping_14", "这是什么材质的？", "이게 어떤 재질이에요?", "Ige eotteon jaejirieyo?", PhraseCategory.SHOPPING),
    PhraseEntry("shopping_15", "可以洗吗？", "세탁돼나요?", "Setakdwaenayo?", PhraseCategory.SHOPPING),
    PhraseEntry("shopping_16", "有保修吗？", "보증 있나요?", "Bojeung innayo?", PhraseCategory.SHOPPING),
    PhraseEntry("shopping_17", "什么时候到期？", "언제까지예요?", "Eonjekkajeyeyo?", PhraseCategory.SHOPPING),
    PhraseEntry("shopping_18", "可以给个折扣吗？", "더 깎아 주실 수 있나요?", "Deo ggaka jusil su innayo?", PhraseCategory.SHOPPING),
    PhraseEntry("shopping_19", "这是最低价吗？", "이게 제일 싼 거예요?", "Ige jeil ssan geoyeo?", PhraseCategory.SHOPPING),
    PhraseEntry("shopping_20", "还有其他优惠吗？", "다른 혜택 없나요?", "Dareun hyeotaek eomnayo?", PhraseCategory.SHOPPING),
    PhraseEntry("shopping_21", "买两个有折扣吗？", "2개 사면 할인돼요?", "2gae samyeon halindwaeyo?", PhraseCategory.SHOPPING),
    PhraseEntry("shopping_22", "可以用优惠券吗？", "쿠폰 쓸 수 있나요?", "Kupon ssul su innayo?", PhraseCategory.SHOPPING),
    PhraseEntry("shopping_23", "可以换货吗？", "교환할 수 있나요?", "Gyohwanhal su innayo?", PhraseCategory.SHOPPING),
    PhraseEntry("shopping_24", "退换货期限是几天？", "교환 기간 며칠이에요?", "Gyohwan gigan myeochilieyo?", PhraseCategory.SHOPPING),
    PhraseEntry("shopping_25", "我想退货", "반품하고 싶어요", "Banpumago sipeoyo", PhraseCategory.SHOPPING),
    PhraseEntry("shopping_26", "可以换成别的颜色吗？", "다른 색으로 바꿀 수 있나요?", "Dareun saegeuro bakkwal su innayo?", PhraseCategory.SHOPPING),
    PhraseEntry("shopping_27", "可以送货吗？", "배송해 주실 수 있나요?", "Baesonghae jusil su innayo?", PhraseCategory.SHOPPING),
    PhraseEntry("shopping_28", "需要额外费用吗？", "추가 비용 드나요?", "Chuga biyong deunayo?", PhraseCategory.SHOPPING),
    PhraseEntry("shopping_29", "可以送礼物包装吗？", "선물 포장해 주세요", "Seonmul pojanghae juseyo", PhraseCategory.SHOPPING),
    PhraseEntry("shopping_30", "有会员卡吗？", "회원카드 있나요?", "Hoewonkadeu innayo?", PhraseCategory.SHOPPING),
)

TRANSPORTATION_PHRASES = (
    PhraseEntry("transportation_01", "请问地铁站在哪？", "지하철역 어디예요?", "Jihacheoryeog eidiyeyo?", PhraseCategory.TRANSPORTATION),
    PhraseEntry("transportation_02", "我要去...", "...에 가고 싶어요", "...e gago sipeoyo", PhraseCategory.TRANSPORTATION),
    PhraseEntry("transportation_03", "这是几号线？", "이거 몇 호선이에요?", "Igeo myeot hoseonieyo?", PhraseCategory.TRANSPORTATION),
    PhraseEntry("transportation_04", "到...需要多久？", "...까지 얼마나 걸려요?", "...kkaji eolmana geollyeoyo?", PhraseCategory.TRANSPORTATION),
    PhraseEntry("transportation_05", "在哪换乘？", "어디서 환승해요?", "Eodiseo hwanseunghaeyo?", PhraseCategory.TRANSPORTATION),
    PhraseEntry("transportation_06", "这是往...方向的车吗？", "이거 ...행이에요?", "Igeo ...haengieyo?", PhraseCategory.TRANSPORTATION),
    PhraseEntry("transportation_07", "请停车", "세워 주세요", "Sewo juseyo", PhraseCategory.TRANSPORTATION),
    PhraseEntry("transportation_08", "下一站是哪里？", "다음 역이 어디예요?", "Daeum yeogi eodiyeyo?", PhraseCategory.TRANSPORTATION),
    PhraseEntry("transportation_09", "去机场怎么走？", "공항怎么 가요?", "Gonghang-eotteon gayo?", PhraseCategory.TRANSPORTATION),
    PhraseEntry("transportation_10", "有地图吗？", "지도 있나요?", "Jido innayo?", PhraseCategory.TRANSPORTATION),
    PhraseEntry("transportation_11", "请问去...怎么走？", "...怎么 가는지 알려주세요", "...eotteon ganeunji alryeojuseyo", PhraseCategory.TRANSPORTATION),
    PhraseEntry("transportation_12", "这里在地图上的哪里？", "지도상에서 어디예요?", "Jidosangeseo eodiyeyo?", PhraseCategory.TRANSPORTATION),
    PhraseEntry("transportation_13", "我迷路了", "길 잃었어요", "Gil ireosseoyo", PhraseCategory.TRANSPORTATION),
    PhraseEntry("transportation_14", "这附近有...吗？", "이 근처에 ... 있나요?", "I geuncheoe ... innayo?", PhraseCategory.TRANSPORTATION),
    PhraseEntry("transportation_15", "往左还是往右？", "왼쪽이에요? 오른쪽이에요?", "Wenjog ieyo? Oreunjog ieyo?", PhraseCategory.TRANSPORTATION),
    PhraseEntry("transportation_16", "需要走多久？", "걸어서 얼마나 걸려요?", "Georeseo eolmana geollyeoyo?", PhraseCategory.TRANSPORTATION),
    PhraseEntry("transportation_17", "我要买一张票", "티켓 한 장 주세요", "Tiket han jang juseyo", PhraseCategory.TRANSPORTATION),
    PhraseEntry("transportation_18", "往返票多少钱？", "왕복 티켓 얼마예요?", "Wangbok tiket eolmayeyo?", PhraseCategory.TRANSPORTATION),
    PhraseEntry("transportation_19", "我要充值交通卡", "교통카드 충전해 주세요", "Gyotongkadeu chungchonhae juseyo", PhraseCategory.TRANSPORTATION),
    PhraseEntry("transportation_20", "这张票可以用几次？", "이 티켓 몇 번 쓸 수 있나요?", "I tiket myeot beon ssul su innayo?", PhraseCategory.TRANSPORTATION),
    PhraseEntry("transportation_21", "一天票多少钱？", "1일권 얼마예요?", "1ilgwon eolmayeyo?", PhraseCategory.TRANSPORTATION),
    PhraseEntry("transportation_22", "有公交吗？", "버스 있나요?", "Beoseu innayo?", PhraseCategory.TRANSPORTATION),
    PhraseEntry("transportation_23", "可以打车吗？", "택시 탈 수 있나요?", "Taeksi tal su innayo?", PhraseCategory.TRANSPORTATION),
    PhraseEntry("transportation_24", "坐地铁快还是打车快？", "지하철이 빨라요? 택시가 빨라요?", "Jihacheori ppallayo? Taeksiga ppallayo?", PhraseCategory.TRANSPORTATION),
    PhraseEntry("transportation_25", "需要换乘吗？", "환승해야 하나요?", "Hwanseunghaeya hanayo?", PhraseCategory.TRANSPORTATION),
    PhraseEntry("transportation_26", "我应该坐哪辆车？", "어떤 버스 타야 돼요?", "Eotteon beoseu taya dwaeyo?", PhraseCategory.TRANSPORTATION),
    PhraseEntry("transportation_27", "这班车到...吗？", "이 버스 ... 가요?", "I beoseu ... gayo?", PhraseCategory.TRANSPORTATION),
    PhraseEntry("transportation_28", "错过站了怎么办？", "역을 지나치면 어떻게 해요?", "Yeogeul jinachimyeon eotteoke haeyo?", PhraseCategory.TRANSPORTATION),
    PhraseEntry("transportation_29", "交通卡余额不足", "교통카드 잔액 부족해요", "Gyotongkadeu janeog bujokhaeyo", PhraseCategory.TRANSPORTATION),
    PhraseEntry("transportation_30", "在哪里充值？", "어디서 충전할 수 있나요?", "Eodiseo chungchonhal su innayo?", PhraseCategory.TRANSPORTATION),
)

EMERGENCY_PHRASES = (
    PhraseEntry("emergency_01", "救命！", "살려주세요!", "Sallyeojuseyo!", PhraseCategory.EMERGENCY),
    PhraseEntry("emergency_02", "请叫警察", "경찰 불러주세요", "Gyeongchal bulleojuseyo", PhraseCategory.EMERGENCY),
    PhraseEntry("emergency_03", "我迷路了", "길을 잃었어요", "Gireul ireosseoyo", PhraseCategory.EMERGENCY),
    PhraseEntry("emergency_04", "我丢钱包了", "지갑 잃어버렸어요", "Jigap ireobeoryeosseoyo", PhraseCategory.EMERGENCY),
    PhraseEntry("emergency_05", "去医院", "병원에 가주세요", "Byeongwone gajuseyo", PhraseCategory.EMERGENCY),
    PhraseEntry("emergency_06", "我受伤了", "다쳤어요", "Dachyeosseoyo", PhraseCategory.EMERGENCY),
    PhraseEntry("emergency_07", "请帮我", "도와주세요", "Dowajuseyo", PhraseCategory.EMERGENCY),
    PhraseEntry("emergency_08", "可以说中文吗？", "중국어 할 수 있나요?", "Junguggeo hal su innayo?", PhraseCategory.EMERGENCY),
    PhraseEntry("emergency_09", "叫救护车", "구급차 불러주세요", "Gupgeucha bulleojuseyo", PhraseCategory.EMERGENCY),
    PhraseEntry("emergency_10", "我肚子疼", "배가 아파요", "Bega apayo", PhraseCategory.EMERGENCY),
    PhraseEntry("emergency_11", "我头痛", "머리가 아파요", "Meoriga apayo", PhraseCategory.EMERGENCY),
    PhraseEntry("emergency_12", "我有心脏病", "심장병 있어요", "Simjangbyeong isseoyo", PhraseCategory.EMERGENCY),
    PhraseEntry("emergency_13", "我对...过敏", "...에 알레르기 있어요", "...e allereugi isseoyo", PhraseCategory.EMERGENCY),
    PhraseEntry("emergency_14", "我手机丢了", "휴대폰 잃어버렸어요", "Hyudaepon ireobeoryeosseoyo", PhraseCategory.EMERGENCY),
    PhraseEntry("emergency_15", "我护照丢了", "여권 잃어버렸어요", "Yeogwon ireobeoryeosseoyo", PhraseCategory.EMERGENCY),
    PhraseEntry("emergency_16", "行李丢了", "짐을 잃어버렸어요", "Jimeul ireobeoryeosseoyo", PhraseCategory.EMERGENCY),
    PhraseEntry("emergency_17", "在哪里可以报案？", "어디서 신고할 수 있나요?", "Eodiseo singohal su innayo?", PhraseCategory.EMERGENCY),
    PhraseEntry("emergency_18", "我被偷了", "도둑맞았어요", "Dodukmatasseoyo", PhraseCategory.EMERGENCY),
    PhraseEntry("emergency_19", "我被抢劫了", "강도를 당했어요", "Gangdoreul danghaesseoyo", PhraseCategory.EMERGENCY),
    PhraseEntry("emergency_20", "我要报警", "경찰에 신고할게요", "Gyeongchale singohalgeyo", PhraseCategory.EMERGENCY),
    PhraseEntry("emergency_21", "派出所怎么走？", "파출소 어떻게 가요?", "Pachulso eotteoke gayo?", PhraseCategory.EMERGENCY),
    PhraseEntry("emergency_22", "中国大使馆电话", "중국 대사관 전화번호", "Jungguk daesagwan jeonhwabeo", PhraseCategory.EMERGENCY),
    PhraseEntry("emergency_23", "需要翻译", "번역사 필요해요", "Beonyeoksa piryohaeyo", PhraseCategory.EMERGENCY),
    PhraseEntry("emergency_24", "着火了！", "불이야!", "Buriya!", PhraseCategory.EMERGENCY),
    PhraseEntry("emergency_25", "请快一点", "빨리 좀 해주세요", "Ppalli jom haejuseyo", PhraseCategory.EMERGENCY),
)

ACCOMMODATION_PHRASES = (
    PhraseEntry("accommodation_01", "我预订了房间", "예약했어요", "Yeyakhaesseoyo", PhraseCategory.ACCOMMODATION),
    PhraseEntry("accommodation_02", "几点早餐？", "아침 식사 몇 시예요?", "Achim sigsa myeot siyeyo?", PhraseCategory.ACCOMMODATION),
    PhraseEntry("accommodation_03", "有WiFi吗？", "와이파이 있나요?", "Waipai innayo?", PhraseCategory.ACCOMMODATION),
    PhraseEntry("accommodation_04", "几点退房？", "체크아웃 몇 시예요?", "Chekeuauteu myeot siyeyo?", PhraseCategory.ACCOMMODATION),
    PhraseEntry("accommodation_05", "可以延迟退房吗？", "늦게 체크아웃할 수 있나요?", "Eutge chekeuauteul su innayo?", PhraseCategory.ACCOMMODATION),
    PhraseEntry("accommodation_06", "有毛巾吗？", "수건 있나요?", "Sugeon innayo?", PhraseCategory.ACCOMMODATION),
    PhraseEntry("accommodation_07", "空调坏了", "에어컨 고장 났어요", "Eokeo gojang nasseoyo", PhraseCategory.ACCOMMODATION),
    PhraseEntry("accommodation_08", "房间很吵", "방이 시끄러워요", "Bangi sikkeureowoyo", PhraseCategory.ACCOMMODATION),
    PhraseEntry("accommodation_09", "能换房间吗？", "방 바꿀 수 있나요?", "Bang bakkwal su innayo?", PhraseCategory.ACCOMMODATION),
    PhraseEntry("accommodation_10", "有洗衣服务吗？", "세탁 서비스 있나요?", "Setak seobiseu innayo?", PhraseCategory.ACCOMMODATION),
    PhraseEntry("accommodation_11", "我要办理入住", "체크인할게요", "Cheukeuinhageyo", PhraseCategory.ACCOMMODATION),
    PhraseEntry("accommodation_12", "请给我房卡", "키주세요", "Ki juseyo", PhraseCategory.ACCOMMODATION),
    PhraseEntry("accommodation_13", "需要押金吗？", "보증금 필요해요?", "Bojeumgeum piryohaeyo?", PhraseCategory.ACCOMMODATION),
    PhraseEntry("accommodation_14", "房间在几楼？", "방이 몇 층이에요?", "Bangi myeot cheungieyo?", PhraseCategory.ACCOMMODATION),
    PhraseEntry("accommodation_15", "电梯在哪里？", "엘리베이터 어디예요?", "Ellibeiteo eodiyeyo?", PhraseCategory.ACCOMMODATION),
    PhraseEntry("accommodation_16", "我要退房", "체크아웃할게요", "Chekeuauteuhageyo", PhraseCategory.ACCOMMODATION),
    PhraseEntry("accommodation_17", "账单请给我", "계산서 주세요", "Gyesanseo juseyo", PhraseCategory.ACCOMMODATION),
    PhraseEntry("accommodation_18", "可以要更多毛巾吗？", "수건 더 주실 수 있나요?", "Sugeon deo jusil su innayo?", PhraseCategory.ACCOMMODATION),
    PhraseEntry("accommodation_19", "有吹风机吗？", "드라이어 있나요?", "Deuraieo innayo?", PhraseCategory.ACCOMMODATION),
    PhraseEntry("accommodation_20", "热水不热", "뜨거운 물 안 나와요", "Tteugeon mul an nawayo", PhraseCategory.ACCOMMODATION),
    PhraseEntry("accommodation_21", "没电了", "전기 안 들어와요", "Jeonji an deureowayo", PhraseCategory.ACCOMMODATION),
    PhraseEntry("accommodation_22", "WiFi密码是什么？", "와이파이 비밀번호 뭐예요?", "Waipai bimilbeonseo mwoyeyo?", PhraseCategory.ACCOMMODATION),
    PhraseEntry("accommodation_23", "可以叫醒服务吗？", "모닝콜 해주세요", "Moningkol haejuseyo", PhraseCategory.ACCOMMODATION),
    PhraseEntry("accommodation_24", "有叫餐服务吗？", "룸서비스 있나요?", "Roomseobiseu innayo?", PhraseCategory.ACCOMMODATION),
    PhraseEntry("accommodation_25", "马桶坏了", "화장실 고장 났어요", "Hwangsiril gojang nasseoyo", PhraseCategory.ACCOMMODATION),
    PhraseEntry("accommodation_26", "门锁不好用", "문 잠금 잘 안 돼요", "Mun jamgeum jal an dwaeyo", PhraseCategory.ACCOMMODATION),
    PhraseEntry("accommodation_27", "房间不干净", "방이 더러워요", "Bangi deoreowoyo", PhraseCategory.ACCOMMODATION),
    PhraseEntry("accommodation_28", "我想再住一晚", "하루 더 묵고 싶어요", "Haru deo mukgo sipeoyo", PhraseCategory.ACCOMMODATION),
    PhraseEntry("accommodation_29", "有空房吗？", "빈 방 있나요?", "Bin bang innayo?", PhraseCategory.ACCOMMODATION),
    PhraseEntry("accommodation_30", "可以寄存行李吗？", "짐 맡길 수 있나요?", "Jim matggil su innayo?", PhraseCategory.ACCOMMODATION),
)

GREETING_PHRASES = (
    PhraseEntry("greeting_01", "你好", "안녕하세요", "Annyeonghaseyo", PhraseCategory.GREETING),
    PhraseEntry("greeting_02", "谢谢", "감사합니다", "Gamsahamnida", PhraseCategory.GREETING),
    PhraseEntry("greeting_03", "对不起", "죄송합니다", "Joesonghamnida", PhraseCategory.GREETING),
    PhraseEntry("greeting_04", "没关系", "괜찮아요", "Gwaenchanaeyo", PhraseCategory.GREETING),
    PhraseEntry("greeting_05", "再见", "안녕히 가세요", "Annyeonghi gaseyo", PhraseCategory.GREETING),
    PhraseEntry("greeting_06", "请问", "저기요", "Jeogiyo", PhraseCategory.GREETING),
    PhraseEntry("greeting_07", "可以吗？", "돼나요?", "Dwaenayo?", PhraseCategory.GREETING),
    PhraseEntry("greeting_08", "当然", "물론이에요", "Mullonieyo", PhraseCategory.GREETING),
    PhraseEntry("greeting_09", "真的吗？", "정말이에요?", "Jeongmalieyo?", PhraseCategory.GREETING),
    PhraseEntry("greeting_10", "不太明白", "잘 모르겠어요", "Jal moreugesseoyo", PhraseCategory.GREETING),
    PhraseEntry("greeting_11", "早上好", "좋은 아침이에요", "Joeun achimieyo", PhraseCategory.GREETING),
    PhraseEntry("greeting_12", "晚上好", "좋은 저녁이에요", "Joeun jeonyeogieyo", PhraseCategory.GREETING),
    PhraseEntry("greeting_13", "晚安", "안녕히 주무세요", "Annyeonghi jumuseyo", PhraseCategory.GREETING),
    PhraseEntry("greeting_14", "不好意思", "죄송해요", "Joesonghaeyo", PhraseCategory.GREETING),
    PhraseEntry("greeting_15", "麻烦你了", "번거로워드려서 죄송해요", "Beongeoroweodyeureoseo joesonghaeyo", PhraseCategory.GREETING),
    PhraseEntry("greeting_16", "请稍等", "잠시만요", "Jamsimanyo", PhraseCategory.GREETING),
    PhraseEntry("greeting_17", "请慢用", "맛있게 드세요", "Masseoge deuseyo", PhraseCategory.GREETING),
    PhraseEntry("greeting_18", "非常感谢", "대단히 감사합니다", "Daedanhi gamsahamnida", PhraseCategory.GREETING),
    PhraseEntry("greeting_19", "没关系", "별말씀을요", "Byeomalsseumeulyo", PhraseCategory.GREETING),
    PhraseEntry("greeting_20", "我明白了", "알겠습니다", "Algetseumnida", PhraseCategory.GREETING),
    PhraseEntry("greeting_21", "没关系", "괜찮습니다", "Gwaenchamseumnida", PhraseCategory.GREETING),
    PhraseEntry("greeting_22", "祝你今天愉快", "좋은 하루 보내세요", "Joeun haru bonaeseyo", PhraseCategory.GREETING),
    PhraseEntry("greeting_23", "旅途愉快", "즐거운 여행 되세요", "Jeulgeoun yeohaeng doeseyo", PhraseCategory.GREETING),
    PhraseEntry("greeting_24", "今天天气真好", "오늘 날씨 좋네요", "Oneul nalssi johneyo", PhraseCategory.GREETING),
    PhraseEntry("greeting_25", "从哪里来？", "어디서 오셨어요?", "Eodiseo osyeosseoyo?", PhraseCategory.GREETING),
)


PHRASE_CATALOG: Tuple[PhraseEntry, ...] = (
    RESTAURANT_PHRASES
    + SHOPPING_PHRASES
    + TRANSPORTATION_PHRASES
    + EMERGENCY_PHRASES
    + ACCOMMODATION_PHRASES
    + GREETING_PHRASES
)

CATEGORY_METADATA: Dict[PhraseCategory, dict] = {
    PhraseCategory.RESTAURANT: {"icon": "🍜", "name": "餐厅"},
    PhraseCategory.SHOPPING: {"icon": "🛍️", "name": "购物"},
    PhraseCategory.TRANSPORTATION: {"icon": "🚇", "name": "交通"},
    PhraseCategory.EMERGENCY: {"icon": "🆘", "name": "紧急"},
    PhraseCategory.ACCOMMODATION: {"icon": "🏨", "name": "住宿"},
    PhraseCategory.GREETING: {"icon": "👋", "name": "问候"},
}


def get_catalog() -> Tuple[PhraseEntry, ...]:
    """Return the full catalog in its canonical order."""
    return PHRASE_CATALOG


def phrases_by_category(category: PhraseCategory) -> List[PhraseEntry]:
    """
    Get catalog entries for one category.

    Args:
        category: Category to filter on

    Returns:
        Entries of that category in catalog order, empty list if none
    """
    return [entry for entry in PHRASE_CATALOG if entry.category == category]


def catalog_stats() -> dict:
    breakdown = {category.value: 0 for category in PhraseCategory}
    for entry in PHRASE_CATALOG:
        breakdown[entry.category.value] += 1
    return {
        "total": len(PHRASE_CATALOG),
        "categories": len(CATEGORY_METADATA),
        "breakdown": breakdown,
    }
