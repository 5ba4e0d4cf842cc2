"""경제 서비스 (잔액 잠금 트랜잭션, 금액 변환, 패시브 수익 분배)"""
