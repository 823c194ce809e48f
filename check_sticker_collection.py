from pymilvus import connections, Collection, utility

from app.core.config import settings


def check_sticker_collection():
    print("Connecting to Milvus...")
    try:
        # 连接 Milvus
        connections.connect(alias="default", host=settings.MILVUS_HOST, port=settings.MILVUS_PORT)
        print("✅ Connected to Milvus!")

        collections = utility.list_collections()
        print(f"\nCollections found: {collections}")

        name = settings.STICKER_COLLECTION
        if name not in collections:
            print(f"\n❌ Collection '{name}' NOT found.")
            return

        collection = Collection(name)
        # 加载集合到内存才能查询
        collection.load()

        count = collection.num_entities
        print(f"\nCollection '{name}' has {count} stickers.")

        print("\nSchema:")
        for field in collection.schema.fields:
            print(f" - {field.name}: {field.dtype} (dim={field.params.get('dim') if field.params else ''})")

        if count > 0:
            # 只查元数据，不查向量
            print("\nSample Stickers (Top 5):")
            results = collection.query(expr="", output_fields=["name"], limit=5)
            for res in results:
                print(res)
        else:
            print("\n⚠️ Collection is empty.")

    except Exception as e:
        print(f"\n❌ Error: {e}")


if __name__ == "__main__":
    check_sticker_collection()
